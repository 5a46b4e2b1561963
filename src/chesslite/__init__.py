"""Chesslite — two-player chess board with move-shape validation."""

__version__ = "0.1.0"
