from flask import Blueprint, current_app, jsonify, request

from moviedb.errors import CatalogValidationError, RelationError
from moviedb.log import get_logger

bp = Blueprint("movies", __name__)
logger = get_logger(__name__)


@bp.route("", methods=["GET"])
def list_movies():
    """List all movies."""
    try:
        movies = current_app.catalog.list_movies()
    except RelationError as e:
        logger.exception("Failed to list movies")
        return jsonify({"errors": str(e)}), 500
    return jsonify({"movies": movies})


@bp.route("", methods=["POST"])
def create_movie():
    """Create a new movie in an existing genre."""
    data = request.get_json(silent=True) or {}
    try:
        movie = current_app.catalog.create_movie(data)
    except CatalogValidationError as e:
        return jsonify({"errors": e.errors}), 422
    except RelationError as e:
        logger.exception("Failed to create movie")
        return jsonify({"errors": str(e)}), 500
    return jsonify({"movie": movie}), 201


@bp.route("/<int:movie_id>", methods=["GET"])
def get_movie(movie_id: int):
    """Get a movie with its genre."""
    try:
        movie = current_app.catalog.get_movie(movie_id)
    except RelationError as e:
        logger.exception("Failed to load movie %s", movie_id)
        return jsonify({"errors": str(e)}), 500
    if not movie:
        return jsonify({"error": "Movie not found"}), 404
    return jsonify({"movie": movie})
