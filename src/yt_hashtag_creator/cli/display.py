"""Display functions for CLI commands - pure functions for Rich output."""

from __future__ import annotations

from typing import Mapping, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..hashtag import HashtagResult


def show_hashtag_result(console: Console, result: HashtagResult) -> None:
    """Display a hashtag result as panels and a ranked table."""
    above = result.placement.above_title
    below = result.placement.in_description

    console.print(Panel(
        f"[bold]{result.concept}[/bold]\n"
        f"Niche: [yellow]{result.niche}[/yellow]  "
        f"Style: [yellow]{result.content_style}[/yellow]\n\n"
        f"[bold]Above title:[/bold] [green]{above.formatted or '-'}[/green]\n"
        f"[dim]{above.note}[/dim]\n\n"
        f"[bold]In description:[/bold] [cyan]{below.formatted or '-'}[/cyan]\n"
        f"[dim]{below.note}[/dim]",
        title="Hashtags",
        border_style="green",
    ))

    table = Table(title="Ranked Hashtags")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Hashtag", style="bold", no_wrap=True)
    table.add_column("Type", style="yellow")
    table.add_column("Priority", justify="right")
    table.add_column("Reason", style="dim")
    for position, hashtag in enumerate(result.hashtags, start=1):
        table.add_row(
            str(position),
            hashtag.tag,
            hashtag.category.value,
            str(hashtag.priority),
            hashtag.reason,
        )
    console.print(table)

    stats = result.statistics
    by_type = ", ".join(f"{name}={count}" for name, count in stats.by_type.items()) or "none"
    console.print(
        f"[bold]Total:[/bold] {stats.total}  "
        f"[bold]Avg length:[/bold] {stats.average_length}  "
        f"[bold]By type:[/bold] {by_type}"
    )

    show_recommendations(console, result.recommendations)


def show_recommendations(console: Console, recommendations: Sequence[str]) -> None:
    """Display recommendations as a bulleted panel."""
    console.print(Panel(
        "\n".join(f"  [yellow]*[/yellow] {item}" for item in recommendations),
        title="Recommendations",
        border_style="yellow",
    ))


def show_catalog_table(
    console: Console,
    title: str,
    catalog: Mapping[str, Sequence[str]],
    used_count: int,
) -> None:
    """Display a niche or style table, marking the tags that get used."""
    table = Table(title=title)
    table.add_column("Name", style="bold cyan")
    table.add_column("Used", style="green")
    table.add_column("Reserve", style="dim")
    for name, tags in catalog.items():
        table.add_row(name, " ".join(tags[:used_count]), " ".join(tags[used_count:]))
    console.print(table)
