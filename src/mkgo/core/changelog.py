"""mkgo's own change history."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape


@dataclass(frozen=True)
class Change:
    package: str
    version: str
    date: str
    description: tuple[str, ...]


CHANGELOG: tuple[Change, ...] = (
    Change("mkgo", "0.1.0", "2020 Oct 10", ("initial implementation",)),
    Change("mkgo", "0.2.0", "2020 Oct 10", ("add support for README and LICENSE generation",)),
    Change("mkgo", "0.2.1", "2021 Mar 8", ("use shorter, abbreviated flags in generated source",)),
    Change(
        "mkgo",
        "0.3.0",
        "2026 Oct 19",
        (
            "only generate README and LICENSE when -r or -l is given",
            "add ISC and BSD-3-Clause licenses",
            "pass the module identifier to go mod init",
        ),
    ),
)


def print_changelog(console: Console, changes: tuple[Change, ...] = CHANGELOG) -> None:
    """Print every change, oldest first."""
    for change in changes:
        console.print(
            f"[bold cyan]{escape(change.package)}[/] [bold]{escape(change.version)}[/]"
            f" [dim]({escape(change.date)})[/]"
        )
        for line in change.description:
            console.print(f"  - {escape(line)}")
