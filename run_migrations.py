#!/usr/bin/env python3
"""
Index setup for the MongoDB users collection.

Creates the indexes the service depends on: a unique index on email
(which turns concurrent duplicate registrations into a clean conflict)
and an index on embedded profile IDs.

Usage:
    uv run python run_migrations.py              # Create missing indexes
    uv run python run_migrations.py --status     # Show existing indexes
    uv run python run_migrations.py --dry-run    # Show what would be created

Configuration:
    Set MONGODB_URL and MONGODB_DATABASE in your .env file:
    MONGODB_URL=mongodb://localhost:27017
    MONGODB_DATABASE=catalog
"""

import argparse
import asyncio
import sys

from rich.console import Console
from rich.table import Table

from shared.config import get_settings
from shared.database import close_client, get_users_collection
from shared.repository import StoreError
from modules.users.repository import UserRepository

console = Console()

REQUIRED_INDEXES = {
    "email_unique": "email (unique)",
    "profiles_id": "profiles.id",
}


def show_status(indexes: dict) -> None:
    """Show the indexes of the users collection."""
    table = Table(title="Users Collection Indexes")
    table.add_column("Index", style="cyan")
    table.add_column("Keys")
    table.add_column("Unique")
    table.add_column("Status", style="green")

    for name, info in indexes.items():
        keys = ", ".join(f"{field} {direction}" for field, direction in info.get("key", []))
        status = "[green]Required[/green]" if name in REQUIRED_INDEXES else "[dim]Other[/dim]"
        table.add_row(name, keys, "yes" if info.get("unique") else "", status)

    for name, description in REQUIRED_INDEXES.items():
        if name not in indexes:
            table.add_row(name, description, "", "[yellow]Missing[/yellow]")

    console.print(table)


async def run(args: argparse.Namespace) -> None:
    repository = UserRepository(get_users_collection())
    try:
        indexes = await repository.index_information()

        if args.status:
            show_status(indexes)
            return

        missing = [name for name in REQUIRED_INDEXES if name not in indexes]
        if not missing:
            console.print("[green]All indexes are up to date![/green]")
            return

        console.print(f"Found {len(missing)} missing index(es):")
        for name in missing:
            console.print(f"  - {name}: {REQUIRED_INDEXES[name]}")
        console.print()

        if args.dry_run:
            return

        created = await repository.ensure_indexes()
        for name in created:
            console.print(f"[green]✓[/green] {name}")
        console.print()
        console.print("[green]Indexes created successfully![/green]")
    finally:
        await close_client()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Create MongoDB indexes for the users collection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uv run python run_migrations.py           Create missing indexes
  uv run python run_migrations.py --status  Show existing indexes
  uv run python run_migrations.py --dry-run Show what would be created
        """
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show index status without changing anything"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show which indexes would be created without creating them"
    )

    args = parser.parse_args()
    settings = get_settings()

    console.print("[bold]Catalog Database Indexes[/bold]")
    console.print(f"[dim]{settings.mongodb_database}.{settings.mongodb_users_collection}[/dim]")
    console.print()

    try:
        asyncio.run(run(args))
    except StoreError as e:
        console.print(f"[red]Error:[/red] {e.message}: {e.details.get('original_error')}")
        sys.exit(1)


if __name__ == "__main__":
    main()
