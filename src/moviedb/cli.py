#!/usr/bin/env python3
"""moviedb CLI for browsing and seeding the catalog."""

import argparse

import questionary
from rich.console import Console
from rich.table import Table

from moviedb.catalog import CatalogService, build_registry
from moviedb.catalog.seed import DEMO_CATALOG, seed_catalog
from moviedb.errors import RelationError
from moviedb.store import PostgresStore

console = Console()


def get_service() -> CatalogService:
    return CatalogService(PostgresStore(), build_registry())


def select_genre(service: CatalogService) -> dict | None:
    """Prompt the user to select a genre."""
    genres = service.list_genres()
    if not genres:
        console.print("[red]No genres found.[/]")
        return None
    return questionary.select(
        "Select a genre:",
        choices=[questionary.Choice(title=g["name"], value=g) for g in genres],
    ).ask()


def list_genres(service: CatalogService) -> None:
    """Print every genre with its movie count."""
    genres = service.list_genres(include_movies=True)
    if not genres:
        console.print("[red]No genres found.[/]")
        return

    table = Table(title="Genres")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Movies", justify="right")
    for genre in genres:
        table.add_row(str(genre["id"]), genre["name"], str(len(genre["movies"])))
    console.print(table)


def show_genre(service: CatalogService) -> None:
    """Print the movies of a selected genre."""
    selected = select_genre(service)
    # User pressed Ctrl+C or Escape
    if selected is None:
        console.print("[dim]Cancelled.[/]")
        return

    genre = service.get_genre(selected["id"])
    if not genre["movies"]:
        console.print(f"[yellow]No movies in {genre['name']}.[/]")
        return

    table = Table(title=genre["name"])
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Year", justify="right")
    for movie in genre["movies"]:
        table.add_row(str(movie["id"]), movie["title"], str(movie["year"] or ""))
    console.print(table)


def seed(service: CatalogService) -> None:
    """Insert the demo catalog after confirmation."""
    movie_count = sum(len(movies) for movies in DEMO_CATALOG.values())
    summary = f"Will add up to {len(DEMO_CATALOG)} genres and {movie_count} movies."
    console.print(f"[yellow]{summary}[/]")

    if not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    result = seed_catalog(service)
    console.print(
        f"[green]Created {result['genres_created']} genres "
        f"and {result['movies_created']} movies.[/]"
    )
    if result["skipped"]:
        console.print(f"[dim]Already present: {', '.join(result['skipped'])}[/]")


def main():
    parser = argparse.ArgumentParser(description="moviedb CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-genres", help="List genres with movie counts")
    subparsers.add_parser("show-genre", help="Show the movies of a genre")
    subparsers.add_parser("seed", help="Seed the demo catalog")

    args = parser.parse_args()
    service = get_service()

    try:
        if args.command == "list-genres":
            list_genres(service)
        elif args.command == "show-genre":
            show_genre(service)
        elif args.command == "seed":
            seed(service)
    except RelationError as e:
        console.print(f"[red]{e}[/]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
