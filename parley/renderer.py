"""Rich terminal output for bids and formation decisions."""

from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from parley.bidding.base import Bid
    from parley.social.formation import FormationDecision


def make_console() -> Console:
    """Create a Rich Console that works on Windows (force UTF-8)."""
    if sys.platform == "win32" and hasattr(sys.stdout, "buffer"):
        utf8_stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
        return Console(file=utf8_stdout, force_terminal=True)
    return Console()


def _strength_style(strength: float) -> str:
    if strength >= 0.7:
        return "bold green"
    if strength >= 0.4:
        return "yellow"
    return "red"


def render_bids(bids: list[Bid], console: Console | None = None) -> None:
    """Print one row per bid, strongest first."""
    console = console or make_console()

    table = Table(title="Turn bids")
    table.add_column("Participant", style="cyan")
    table.add_column("Strength", justify="right")
    table.add_column("Reason")
    table.add_column("Details", style="dim")

    for bid in sorted(bids, key=lambda b: b.strength, reverse=True):
        details = ""
        if bid.metadata:
            details = ", ".join(
                f"{key}={value:.2f}" if isinstance(value, float) else f"{key}={value}"
                for key, value in bid.metadata.items()
            )
        table.add_row(
            bid.participant_id,
            f"[{_strength_style(bid.strength)}]{bid.strength:.2f}[/]",
            bid.reason,
            details,
        )

    console.print(table)


def render_decision(
    participant_id: str, decision: FormationDecision, console: Console | None = None
) -> None:
    """Print a formation decision for one participant."""
    console = console or make_console()

    if not decision.should_form:
        console.print(f"[dim]{participant_id}: no coalition recommended[/]")
        return

    table = Table(title=f"Coalition proposal for {participant_id}")
    table.add_column("Topic", style="cyan")
    table.add_column("Allies")
    table.add_column("Strength", justify="right")
    table.add_row(decision.topic, ", ".join(decision.allies), f"{decision.strength:.2f}")
    console.print(table)
