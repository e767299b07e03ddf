"""Small teaching programs: Eliza, calculators, a number trick and a scope demo."""

__version__ = "0.1.0"
__all__ = ["doctor", "eliza", "investment", "profit", "guessing", "scope"]