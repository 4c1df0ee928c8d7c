"""Seed the demo genres and movies into the database."""
from moviedb.catalog import CatalogService, build_registry
from moviedb.catalog.seed import seed_catalog
from moviedb.store import PostgresStore


def main():
    service = CatalogService(PostgresStore(), build_registry())
    result = seed_catalog(service)

    for name in result["skipped"]:
        print(f"{name} already exists, added any missing movies")
    print(f"Created: {result['genres_created']} genres, {result['movies_created']} movies")


if __name__ == "__main__":
    main()
