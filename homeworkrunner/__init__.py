"""Status output helpers, example account programs and lesson functions for homework."""

__version__ = "0.1.0"