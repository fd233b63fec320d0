#!/usr/bin/env python3
"""Initialize the database schema and materialize the deck."""

from rich.console import Console
from rich.panel import Panel

from rangedrill.catalog.ranges import all_identities
from rangedrill.config import Config
from rangedrill.srs.scheduler import ReviewScheduler


console = Console()


def main() -> None:
    console.rule("[bold blue]Initializing Rangedrill Database")

    config = Config.from_env()
    console.print(f"Database path: {config.database_path}")

    scheduler = ReviewScheduler.from_config(config, all_identities())
    console.print("[green]✓ Schema created[/green]")

    existing = config.deck_storage_key in scheduler.db.list_keys()
    scheduler.deck.ensure_loaded(scheduler.catalog)
    if not existing:
        # Write the fresh deck so later loads restore rather than rebuild it
        scheduler.deck.persist()
        console.print(f"[green]✓ Created deck with {len(scheduler.deck)} cards[/green]")
    else:
        console.print(f"[yellow]Deck already exists ({len(scheduler.deck)} cards)[/yellow]")

    scheduler.db.close()
    console.print(Panel("[bold green]Database initialized successfully!", title="Done"))


if __name__ == "__main__":
    main()
