"""CLI entry point - wrapper for running from a source checkout

This file allows ``python cli.py <command>`` by importing and running
the main CLI from the cli package.
"""

import sys

from cli.main import main

if __name__ == "__main__":
    sys.exit(main())
