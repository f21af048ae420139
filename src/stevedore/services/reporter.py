"""Run report.

Collects one outcome per processed context and renders them as a table.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from stevedore.models import Outcome, OutcomeStatus


class Reporter:
    """Append-only, ordered list of outcomes."""

    def __init__(self):
        self._outcomes: list[Outcome] = []

    def record(self, context_name: str, status: OutcomeStatus, message: str) -> None:
        self._outcomes.append(
            Outcome(context_name=context_name, status=status, message=message)
        )

    @property
    def outcomes(self) -> tuple[Outcome, ...]:
        return tuple(self._outcomes)

    @property
    def succeeded(self) -> list[Outcome]:
        return [o for o in self._outcomes if o.succeeded]

    @property
    def failed(self) -> list[Outcome]:
        return [o for o in self._outcomes if not o.succeeded]

    @property
    def has_failures(self) -> bool:
        return any(not o.succeeded for o in self._outcomes)

    def __len__(self) -> int:
        return len(self._outcomes)

    def build_table(self) -> Table:
        table = Table(title="Stevedore Report")
        table.add_column("Context", style="cyan", no_wrap=True)
        table.add_column("Status")
        table.add_column("Message", style="dim")

        for outcome in self._outcomes:
            if outcome.succeeded:
                status = "[green]SUCCESS[/green]"
            else:
                status = "[red]FAILED[/red]"
            table.add_row(outcome.context_name, status, outcome.message)

        return table

    def print(self, console: Console | None = None) -> None:
        (console or Console()).print(self.build_table())
