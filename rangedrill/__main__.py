"""Main entry point for the terminal range drill."""

import logging

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table

from rangedrill.catalog.ranges import (
    all_identities,
    expected_actions,
    parse_action,
    position_label,
)
from rangedrill.config import Config
from rangedrill.db.models import CardState
from rangedrill.srs.scheduler import ReviewScheduler

console = Console()

QUIT_COMMANDS = {"q", "quit", "exit"}
RESET_COMMANDS = {"reset"}


def format_hand(hand: str) -> str:
    """Render a hand with rich markup: green for suited, red for offsuit."""
    if hand.endswith("s"):
        return f"{hand[:-1]}[green]s[/green]"
    if hand.endswith("o"):
        return f"{hand[:-1]}[red]o[/red]"
    return hand


def build_dashboard(scheduler: ReviewScheduler) -> Table:
    """Mastery, current streak and overall accuracy in one row."""
    stats = scheduler.current_stats()
    table = Table(show_header=True, header_style="bold")
    table.add_column("Mastered", justify="center")
    table.add_column("Streak", justify="center")
    table.add_column("Best", justify="center")
    table.add_column("Accuracy", justify="center")
    table.add_row(
        f"[green]{scheduler.mastery_percent()}%[/green]",
        f"[yellow]{stats.current_streak}[/yellow]",
        str(stats.best_streak),
        f"[blue]{stats.accuracy_percent}%[/blue]",
    )
    return table


def render_card(card: CardState) -> Panel:
    return Panel.fit(
        f"[bold]{format_hand(card.identity.category)}[/bold]",
        title=escape(position_label(card.identity.context)),
    )


def confirm_reset(scheduler: ReviewScheduler, out: Console, confirm=Confirm.ask) -> bool:
    """Ask before wiping progress; reset and rebuild the deck if confirmed."""
    if not confirm("Reset all progress?", console=out, default=False):
        out.print("[yellow]Reset cancelled[/yellow]")
        return False
    scheduler.reset_progress()
    scheduler.reload_deck()
    out.print("[green]✓ Progress reset[/green]")
    return True


def run_drill(
    scheduler: ReviewScheduler,
    out: Console = console,
    ask=Prompt.ask,
    confirm=Confirm.ask,
    max_rounds: int | None = None,
) -> int:
    """Run the interactive drill loop and return the number of answers recorded."""
    answered = 0
    while max_rounds is None or answered < max_rounds:
        out.print(build_dashboard(scheduler))
        card = scheduler.next_item()
        out.print(render_card(card))

        raw = ask("Action (f)old / (c)all / (r)aise / (3)-bet, or reset / quit", console=out)
        command = raw.strip().lower()
        if command in QUIT_COMMANDS:
            break
        if command in RESET_COMMANDS:
            confirm_reset(scheduler, out, confirm)
            continue

        action = parse_action(raw)
        if action is None:
            out.print(f"[red]Unknown action: {escape(repr(raw))}[/red]")
            continue

        expected = expected_actions(card.identity)
        correct = action in expected
        scheduler.record_answer(card.identity, correct)
        answered += 1

        expected_text = " / ".join(a.value for a in expected)
        if correct:
            out.print(f"[green]✓ Correct[/green] ({expected_text})")
        else:
            out.print(f"[red]✗ {action.value} is wrong[/red], expected {expected_text}")

    return answered


def main():
    """Run the drill with configuration from the environment."""
    config = Config.from_env()
    logging.basicConfig(level=config.log_level)

    scheduler = ReviewScheduler.from_config(config, all_identities())

    console.print(
        Panel.fit(
            f"Database: {config.database_path}\n"
            f"Cards: {len(scheduler.catalog)}\n"
            "\nType an action for each spot, 'reset' to start over, 'quit' to leave.",
            title="Preflop Range Drill",
        )
    )

    try:
        answered = run_drill(scheduler)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Interrupted[/yellow]")
        return
    finally:
        scheduler.db.close()

    console.print(f"[blue]Recorded {answered} answers this session[/blue]")


if __name__ == "__main__":
    main()
