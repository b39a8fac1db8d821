#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four console game

Usage:
    python run.py play [--seed N]
    python run.py check --position <cells>
    python run.py --debug play
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
