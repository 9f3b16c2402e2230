"""Lay out plain-text documents as justified side-by-side columns."""

__version__ = "0.1.0"
