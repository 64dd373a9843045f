"""Small Unix-style command-line tools and the pieces they are built from."""

__version__ = "0.1.0"