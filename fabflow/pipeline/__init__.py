"""Pipeline stages — planner and formatter.

Each stage consumes the previous stage's value.  The stages in order:

  planner    — map recipe steps onto the layout, estimate duration,
               suggest a process type
  formatter  — render the process flow as text, Markdown or JSON

Shared constants live in `fabflow.pipeline.config`.
"""
