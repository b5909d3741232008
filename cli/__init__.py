"""CLI package for ouraclaw

This package provides the command-line interface: argument parsing,
logging setup and the command handlers.
"""

from cli.main import main

__all__ = [
    "main",
]
