"""Kochbuch recipe import service."""

__version__ = "0.1.0"
