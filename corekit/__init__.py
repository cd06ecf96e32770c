"""Helpers for text, ordered collections, time stamps and files."""

__version__ = "0.1.0"
__all__ = ["numbers", "findreplace", "extraction", "strings", "indexed", "timing", "fileio"]