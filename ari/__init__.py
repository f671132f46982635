"""Small utilities: comparison, formatting, hashing, text, file system, synchronisation and timing helpers."""

__version__ = "0.1.0"