"""Spell checking and suggestions over HTTP."""

__version__ = "0.1.0"
