from flask import Flask

from moviedb.association import AssociationRegistry
from moviedb.catalog import CatalogService, build_registry
from moviedb.log import setup_logging
from moviedb.store import DataStore, PostgresStore


def create_app(store: DataStore = None, registry: AssociationRegistry = None) -> Flask:
    """Application factory."""
    setup_logging()
    app = Flask(__name__)

    # Build the association registry once; a bad declaration stops startup here
    app.registry = registry or build_registry()
    app.store = store or PostgresStore()
    app.catalog = CatalogService(app.store, app.registry)

    # Register blueprints
    from moviedb.api.genres import bp as genres_bp
    from moviedb.api.movies import bp as movies_bp
    from moviedb.routes.genres import bp as genre_pages_bp

    app.register_blueprint(genres_bp, url_prefix="/api/v1/genres")
    app.register_blueprint(movies_bp, url_prefix="/api/v1/movies")
    app.register_blueprint(genre_pages_bp, url_prefix="/genres")

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    return app


# For flask run command
app = create_app()
