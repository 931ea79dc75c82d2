"""Practice problem tracker with a spaced-repetition revision queue."""

__version__ = "0.1.0"
