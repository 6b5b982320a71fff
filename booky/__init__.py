"""booky - a small terminal book list."""

__version__ = "0.1.0"
