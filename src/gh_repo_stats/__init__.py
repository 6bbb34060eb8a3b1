"""Classifica delle repository più attive su GHArchive in una finestra temporale."""

__version__ = "0.1.0"
