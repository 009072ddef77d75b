"""
Entry point for running the sdklocator CLI as a module.

Usage: python -m sdklocator.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
