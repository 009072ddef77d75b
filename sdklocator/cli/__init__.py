"""
Command-line interface for sdklocator.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
