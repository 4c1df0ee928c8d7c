from moviedb.association.registry import AssociationRegistry, Cardinality, EntityType

GENRE = EntityType(name="Genre", table="genres", fields=("id", "name"))
MOVIE = EntityType(name="Movie", table="movies", fields=("id", "title", "year", "genre_id"))


def build_registry() -> AssociationRegistry:
    """Declare the catalog's entity types and the associations between them."""
    registry = AssociationRegistry()
    registry.define(GENRE)
    registry.define(MOVIE)

    # A genre has many movies; each movie belongs to one genre.
    registry.register("Genre", "movies", Cardinality.MANY, "Movie", "id", "genre_id")
    registry.register("Movie", "genre", Cardinality.ONE, "Genre", "genre_id", "id")
    return registry
