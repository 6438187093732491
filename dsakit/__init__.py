"""Classic algorithms: dynamic programming, number routines, hashing, recursion and text patterns."""

__version__ = "0.1.0"