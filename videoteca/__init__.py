"""Catalogue of movies and series with ratings, genre filters, CSV loading and a text menu."""

__version__ = "0.1.0"
__all__ = ["catalog", "cli", "models"]