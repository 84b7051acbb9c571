"""A domino game against a computer opponent, with rules, records and a pygame window."""

__version__ = "0.1.0"
__all__ = ["app", "font", "game", "records", "render"]