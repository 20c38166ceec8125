"""Taxonomy admin service for the operations portal."""

__version__ = "0.1.0"
