"""Genres, movies, and the associations between them."""
