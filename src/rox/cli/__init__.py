"""
Rox Command-Line Interface
==========================

- **rox**: run the scanner over a script or an interactive prompt

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["rox"]
