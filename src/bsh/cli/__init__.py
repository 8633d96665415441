"""
bsh Command-Line Interface
==========================

This package provides command-line tools built on the bsh scanner:

- **bshlex**: dump the token stream of a bsh source file

Each tool is implemented as a Click-based CLI application with
help and error reporting.
"""

__all__ = ["bshlex"]
