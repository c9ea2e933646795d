"""EAN Price Finder backend."""

__version__ = "1.0.0"
