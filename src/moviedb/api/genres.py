from flask import Blueprint, current_app, jsonify, request

from moviedb.errors import CatalogValidationError, RelationError
from moviedb.log import get_logger

bp = Blueprint("genres", __name__)
logger = get_logger(__name__)


@bp.route("", methods=["GET"])
def list_genres():
    """List all genres. ?include=movies attaches each genre's movies."""
    include_movies = request.args.get("include", "").lower() == "movies"
    try:
        genres = current_app.catalog.list_genres(include_movies=include_movies)
    except RelationError as e:
        logger.exception("Failed to list genres")
        return jsonify({"errors": str(e)}), 500
    return jsonify({"genres": genres})


@bp.route("", methods=["POST"])
def create_genre():
    """Create a new genre."""
    data = request.get_json(silent=True) or {}
    try:
        genre = current_app.catalog.create_genre(data)
    except CatalogValidationError as e:
        return jsonify({"errors": e.errors}), 422
    except RelationError as e:
        logger.exception("Failed to create genre")
        return jsonify({"errors": str(e)}), 500
    return jsonify({"genre": genre}), 201


@bp.route("/<int:genre_id>", methods=["GET"])
def get_genre(genre_id: int):
    """Get a genre with its movies."""
    try:
        genre = current_app.catalog.get_genre(genre_id)
    except RelationError as e:
        logger.exception("Failed to load genre %s", genre_id)
        return jsonify({"errors": str(e)}), 500
    if not genre:
        return jsonify({"error": "Genre not found"}), 404
    return jsonify({"genre": genre})
