#!/usr/bin/env python3
"""Run the claude-notify formula without installing it.

Usage:
    python run.py install [SOURCE] [--prefix DIR] [--config FILE] [--debug]
    python run.py test|uninstall [--prefix DIR]
    python run.py caveats|info
"""
import sys

from formula.main import main

if __name__ == "__main__":
    sys.exit(main())
