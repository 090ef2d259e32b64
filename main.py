#!/usr/bin/env python3
"""
Sweeper - Main entry point.

Usage:
    python main.py [--width N] [--height N] [--mines N] [--seed HEX] [--cartesian]
"""
from src.sweeper.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
