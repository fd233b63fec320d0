#!/usr/bin/env python3
"""Print overall stats and mastery per table position."""

from rich.console import Console
from rich.table import Table

from rangedrill.catalog.ranges import Position, all_identities
from rangedrill.config import Config
from rangedrill.srs.scheduler import ReviewScheduler


console = Console()


def main() -> None:
    console.rule("[bold blue]Rangedrill Progress")

    config = Config.from_env()
    scheduler = ReviewScheduler.from_config(config, all_identities())
    scheduler.deck.ensure_loaded(scheduler.catalog)

    stats = scheduler.current_stats()
    console.print(f"Reviews: {stats.total_reviews} ({stats.accuracy_percent}% correct)")
    console.print(f"Streak: {stats.current_streak} (best {stats.best_streak})")
    console.print(f"Mastery: [green]{scheduler.mastery_percent()}%[/green] at clock {scheduler.clock}")

    table = Table(title="By position")
    table.add_column("Position")
    table.add_column("Seen", justify="right")
    table.add_column("Mastered", justify="right")
    table.add_column("Cards", justify="right")

    cards = scheduler.deck.cards()
    for position in Position:
        at_position = [c for c in cards if c.identity.context == position.value]
        seen = sum(1 for c in at_position if not c.is_new)
        mastered = sum(1 for c in at_position if c.is_mastered)
        table.add_row(position.value, str(seen), str(mastered), str(len(at_position)))

    console.print(table)
    scheduler.db.close()


if __name__ == "__main__":
    main()
