#!/usr/bin/env python3
"""Command line entry point for basehat."""

import sys
from basehat.cli import run

if __name__ == "__main__":
    sys.exit(run())
