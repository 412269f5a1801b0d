"""A side-scrolling terminal shooter whose world is built from a chunked seed map."""

__version__ = "0.1.0"