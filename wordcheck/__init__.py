"""Spell-check a text against a word list: a case-insensitive dictionary and a command-line checker."""

__version__ = "0.1.0"
__all__ = ["__version__"]