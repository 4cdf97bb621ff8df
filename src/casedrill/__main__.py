"""
Entry point for running casedrill as a module.

Usage:
    python -m casedrill
    python -m casedrill --help
"""
from .cli import main

if __name__ == "__main__":
    main()
