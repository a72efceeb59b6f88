"""fabflow — nanofabrication process flows from mask layouts.

Run `python -m fabflow --help` (or `fab-gen --help`) for the command line.
"""

__version__ = "1.0.0"
