"""
Entry point for running the sdklocator CLI as a module.

Usage: python -m sdklocator [command] [options]
"""

from sdklocator.cli.parser import main

if __name__ == "__main__":
    main()
