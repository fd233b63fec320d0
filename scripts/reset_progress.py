#!/usr/bin/env python3
"""Clear all stored review progress."""

import sys

from rich.console import Console
from rich.prompt import Confirm

from rangedrill.catalog.ranges import all_identities
from rangedrill.config import Config
from rangedrill.srs.scheduler import ReviewScheduler


console = Console()


def main() -> None:
    console.rule("[bold red]Reset Rangedrill Progress")

    config = Config.from_env()

    if "--yes" not in sys.argv and not Confirm.ask(
        f"Delete all progress in {config.database_path}?", default=False
    ):
        console.print("[yellow]Nothing changed[/yellow]")
        return

    scheduler = ReviewScheduler.from_config(config, all_identities())
    scheduler.reset_progress()
    scheduler.db.close()
    console.print("[green]✓ Deck and stats cleared[/green]")


if __name__ == "__main__":
    main()
