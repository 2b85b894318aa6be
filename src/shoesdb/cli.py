#!/usr/bin/env python3
"""shoesdb CLI for inserting and looking up shoes and ratings."""

import argparse
import sys

import questionary
from rich.console import Console
from rich.table import Table

from shoesdb.config import config
from shoesdb.db import PostgresStore, connect
from shoesdb.errors import ConnectionConstructionError, ShoesDBError
from shoesdb.keys import ById, ByName
from shoesdb.log_config import setup_logging
from shoesdb.shoe import ShoeRepository
from shoesdb.truetosize import TrueToSizeRepository

console = Console()


def confirm(summary: str, assume_yes: bool) -> bool:
    """Show a summary of the pending change and ask before applying it."""
    console.print(f"[yellow]{summary}[/]")
    if assume_yes:
        return True
    if not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return False
    return True


def insert_shoes(store: PostgresStore, args) -> None:
    """Insert one or more shoes by name."""
    summary = f"Will insert {len(args.names)} shoe(s): [bold]{', '.join(args.names)}[/]."
    if not confirm(summary, args.yes):
        return

    inserted = ShoeRepository(store).insert(args.names)
    console.print(f"[green]Inserted {inserted} shoe(s).[/]")


def insert_ratings(store: PostgresStore, args) -> None:
    """Insert one or more true-to-size ratings, optionally for a shoe."""
    target = f"shoe {args.shoe_id}" if args.shoe_id is not None else "no shoe"
    summary = f"Will insert {len(args.ratings)} rating(s) for {target}."
    if not confirm(summary, args.yes):
        return

    inserted = TrueToSizeRepository(store).insert(args.ratings, shoe_id=args.shoe_id)
    console.print(f"[green]Inserted {inserted} rating(s).[/]")


def lookup(store: PostgresStore, args) -> None:
    """Print the true-to-size ratings for one shoe."""
    key = ById(args.id) if args.id is not None else ByName(args.name)
    ratings = TrueToSizeRepository(store).find(key)

    if not ratings:
        console.print("[red]No ratings found.[/]")
        return

    label = f"shoe {args.id}" if args.id is not None else args.name
    table = Table(title=f"True-to-size ratings for {label}")
    table.add_column("#", justify="right")
    table.add_column("Rating", justify="right")
    for i, rating in enumerate(ratings, start=1):
        table.add_row(str(i), str(rating))
    console.print(table)
    console.print(f"Average: {sum(ratings) / len(ratings):.2f}")


COMMANDS = {
    "insert-shoes": insert_shoes,
    "insert-ratings": insert_ratings,
    "lookup": lookup,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="shoesdb CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    shoes = subparsers.add_parser("insert-shoes", help="Insert shoes by name")
    shoes.add_argument("names", nargs="+", metavar="NAME")
    shoes.add_argument("-y", "--yes", action="store_true", help="Skip confirmation")

    ratings = subparsers.add_parser("insert-ratings", help="Insert true-to-size ratings")
    ratings.add_argument("ratings", nargs="+", type=int, metavar="RATING")
    ratings.add_argument("--shoe-id", type=int, default=None)
    ratings.add_argument("-y", "--yes", action="store_true", help="Skip confirmation")

    find = subparsers.add_parser("lookup", help="Look up true-to-size ratings for a shoe")
    group = find.add_mutually_exclusive_group(required=True)
    group.add_argument("--id", type=int)
    group.add_argument("--name")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(config.log_level, config.log_file)

    try:
        store = connect()
    except ConnectionConstructionError as e:
        console.print(f"[red]Could not connect to the shoes database: {e}[/]")
        return 1

    with store:
        try:
            COMMANDS[args.command](store, args)
        except ShoesDBError as e:
            console.print(f"[red]{type(e).__name__}: {e}[/]")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
