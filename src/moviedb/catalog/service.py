from typing import List, Optional

from moviedb.association import AssociationRegistry, RelationResolver
from moviedb.catalog.schema import GENRE, MOVIE
from moviedb.errors import CatalogValidationError
from moviedb.log import get_logger
from moviedb.store.base import DataStore

logger = get_logger(__name__)


class CatalogService:
    """
    Genre and movie use cases: fetch a record, then attach its related
    records through the resolver.
    """

    def __init__(
        self,
        store: DataStore,
        registry: AssociationRegistry,
        resolver: RelationResolver = None,
    ):
        self.store = store
        self.registry = registry
        self.resolver = resolver or RelationResolver(registry)

    # -------------------------------------------------------------------------
    # Genres
    # -------------------------------------------------------------------------

    def list_genres(self, include_movies: bool = False) -> List[dict]:
        """List all genres, optionally with their movies attached."""
        genres = self.store.list_all(GENRE)
        if include_movies:
            return self.resolver.attach_each(GENRE.name, genres, "movies", self.store)
        return genres

    def get_genre(self, genre_id: int) -> Optional[dict]:
        """Get a genre with its movies, or None if it does not exist."""
        genre = self.store.find_by_id(GENRE, genre_id)
        if genre is None:
            return None
        return self.resolver.attach(GENRE.name, genre, "movies", self.store)

    def create_genre(self, data: dict) -> dict:
        """Validate and store a new genre."""
        name = _required_text(data, "name")
        if name is None:
            raise CatalogValidationError({"name": "is required"})

        genre = self.store.insert(GENRE, {"name": name})
        logger.info("Created genre %s (id=%s)", genre["name"], genre["id"])
        return genre

    # -------------------------------------------------------------------------
    # Movies
    # -------------------------------------------------------------------------

    def list_movies(self) -> List[dict]:
        """List all movies."""
        return self.store.list_all(MOVIE)

    def get_movie(self, movie_id: int) -> Optional[dict]:
        """Get a movie with its genre, or None if it does not exist."""
        movie = self.store.find_by_id(MOVIE, movie_id)
        if movie is None:
            return None
        return self.resolver.attach(MOVIE.name, movie, "genre", self.store)

    def create_movie(self, data: dict) -> dict:
        """Validate and store a new movie. The genre must already exist."""
        errors = {}

        title = _required_text(data, "title")
        if title is None:
            errors["title"] = "is required"

        year = data.get("year")
        if year is not None and (isinstance(year, bool) or not isinstance(year, int)):
            errors["year"] = "must be an integer"

        genre_id = data.get("genre_id")
        if genre_id is None:
            errors["genre_id"] = "is required"
        elif isinstance(genre_id, bool) or not isinstance(genre_id, int):
            errors["genre_id"] = "must be an integer"
        elif self.store.find_by_id(GENRE, genre_id) is None:
            errors["genre_id"] = "does not reference an existing genre"

        if errors:
            raise CatalogValidationError(errors)

        movie = self.store.insert(MOVIE, {"title": title, "year": year, "genre_id": genre_id})
        logger.info("Created movie %s (id=%s, genre_id=%s)", movie["title"], movie["id"], genre_id)
        return movie


def _required_text(data: dict, field: str) -> Optional[str]:
    value = data.get(field)
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()
