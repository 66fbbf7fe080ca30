"""Building blocks of a Markdown viewer: keys, history, images and HTML helpers."""

__version__ = "0.1.0"