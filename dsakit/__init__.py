"""Classic data-structure and algorithm routines."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked", "maths", "search", "strings", "structures", "trees"]