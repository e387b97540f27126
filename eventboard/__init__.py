"""Tk event board: a table of outings with details, a context menu and exit confirmation."""

__version__ = "0.1.0"