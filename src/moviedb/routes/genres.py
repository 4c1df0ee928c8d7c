from flask import Blueprint, abort, current_app, render_template

from moviedb.errors import RelationError
from moviedb.log import get_logger

bp = Blueprint("genre_pages", __name__)
logger = get_logger(__name__)


@bp.route("")
def index():
    try:
        genres = current_app.catalog.list_genres()
    except RelationError:
        logger.exception("Failed to render genre index")
        abort(500)
    return render_template("genres/index.html", genres=genres)


@bp.route("/<int:genre_id>")
def show(genre_id: int):
    try:
        genre = current_app.catalog.get_genre(genre_id)
    except RelationError:
        logger.exception("Failed to render genre %s", genre_id)
        abort(500)
    if genre is None:
        abort(404)

    # Movie tiles are built from the nested list, which is always present
    movie_tiles = [
        {"id": movie["id"], "title": movie["title"], "year": movie.get("year")}
        for movie in genre.get("movies", [])
    ]
    return render_template("genres/show.html", genre=genre, movie_tiles=movie_tiles)
