"""guidscan - find GUID literals in large text files."""

__version__ = "0.1.0"
