"""Student records kept in a roster sorted by student ID, with an interactive menu."""

__version__ = "1.0.0"
__all__ = ["__version__"]