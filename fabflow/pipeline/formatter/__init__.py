"""Formatter — render a ProcessFlow as text, Markdown or JSON."""

from .text import format_text
from .markdown import format_markdown
from .output import FORMATS, format_json, render_flow, write_output

__all__ = [
    "format_text", "format_markdown", "format_json",
    "FORMATS", "render_flow", "write_output",
]
