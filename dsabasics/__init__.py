"""Classic beginner algorithms: arrays, math, hashing, text patterns, recursion and sorting."""

__version__ = "0.1.0"
__all__ = ["arrays", "basic_math", "hashing", "patterns", "recursion", "sorting"]