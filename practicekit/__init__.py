"""Small programming exercises: array and string puzzles, number helpers, text patterns, a bank account and an employee register."""

__version__ = "0.1.0"