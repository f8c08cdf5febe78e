"""Faleproxy — fetch a web page, absolutize its URLs and rewrite its text."""

__version__ = "1.0.0"
