"""Append Linkding bookmarks to a note in a local vault."""

__version__ = "0.1.0"
