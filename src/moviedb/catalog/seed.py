from moviedb.catalog.service import CatalogService
from moviedb.log import get_logger

logger = get_logger(__name__)

DEMO_CATALOG = {
    "drama": [
        {"title": "Short Term 12", "year": 2013},
        {"title": "Moonlight", "year": 2016},
    ],
    "comedy": [
        {"title": "The Grand Budapest Hotel", "year": 2014},
    ],
    "horror": [],
}


def seed_catalog(service: CatalogService, catalog: dict = None) -> dict:
    """
    Insert genres and their movies.

    Every insert commits on its own, so a run can stop halfway. Genres that
    already exist (by name) are not created again, but any of their movies
    missing by title are still added, so re-running completes a partial seed.

    Returns:
        dict with counts of created genres and movies, and the names of
        genres that already existed
    """
    catalog = DEMO_CATALOG if catalog is None else catalog
    existing = {genre["name"]: genre for genre in service.list_genres(include_movies=True)}

    result = {"genres_created": 0, "movies_created": 0, "skipped": []}
    for name, movies in catalog.items():
        genre = existing.get(name)
        if genre is None:
            genre = service.create_genre({"name": name})
            genre["movies"] = []
            result["genres_created"] += 1
        else:
            logger.info("Genre %s already exists", name)
            result["skipped"].append(name)

        titles = {movie["title"] for movie in genre["movies"]}
        for movie in movies:
            if movie["title"] in titles:
                continue
            service.create_movie({**movie, "genre_id": genre["id"]})
            result["movies_created"] += 1

    return result
