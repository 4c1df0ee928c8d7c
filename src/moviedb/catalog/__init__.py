"""
Catalog

Genres, movies, and the one-to-many association between them.
"""

from moviedb.catalog.schema import GENRE, MOVIE, build_registry
from moviedb.catalog.service import CatalogService

__all__ = ["CatalogService", "GENRE", "MOVIE", "build_registry"]
