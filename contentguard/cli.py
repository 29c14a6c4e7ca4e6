"""contentguard CLI — moderate text and inspect the term catalog from a shell."""

import json

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from contentguard import __version__
from contentguard.config import get_settings
from contentguard.observability import setup_logging

console = Console()

_DECISION_STYLE = {"APPROVE": "green", "FLAG": "yellow", "BLOCK": "red"}


def _moderator(catalog_path: str | None):
    from contentguard.moderation.moderator import ContentModerator

    return ContentModerator(catalog_path=catalog_path)


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Logging level (default: CONTENTGUARD_LOG_LEVEL or INFO)")
def main(log_level: str | None):
    """contentguard — rule-based moderation for user-generated text.

    Scores reviews, messages and listing text for abuse, spam and off-topic
    content and decides whether to approve, flag or block it.
    """
    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_format)


# ── Check ────────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
@click.option("--reputation", "-r", default=50, type=click.IntRange(0, 100), help="Submitter reputation (0-100)")
@click.option("--content-type", default="review", type=click.Choice(["review", "listing_title", "listing_description", "message"]))
@click.option("--catalog", "catalog_path", default=None, help="Path to a term catalog YAML/JSON file")
@click.option("--json", "as_json", is_flag=True, help="Print the raw response as JSON")
def check(text: str, reputation: int, content_type: str, catalog_path: str | None, as_json: bool):
    """Moderate TEXT and print the decision."""
    from contentguard.moderation.models import ModerationRequest

    moderator = _moderator(catalog_path)
    response = moderator.moderate(
        ModerationRequest(text=text, user_reputation=reputation, content_type=content_type)
    )

    if as_json:
        click.echo(json.dumps(response.to_dict(), indent=2))
        return

    style = _DECISION_STYLE[response.decision.value]
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="dim")
    table.add_column("Value")
    table.add_row("Decision", f"[bold {style}]{response.decision.value}[/]")
    table.add_row("Score", str(response.score))
    table.add_row("Category", response.category.value)
    table.add_row("Severity", response.severity.value)
    table.add_row("Matched", ", ".join(response.matched_terms or []) or "-")
    table.add_row("Reason", response.reason)
    table.add_row("Time", f"{response.processing_time_ms}ms")
    console.print(Panel(table, title="Moderation Result"))

    if moderator.catalog.degraded:
        console.print("[yellow]![/] Term catalog failed to load; only fallback critical terms are active.")


@main.command(name="quick-check")
@click.argument("text")
@click.option("--catalog", "catalog_path", default=None, help="Path to a term catalog YAML/JSON file")
def quick_check(text: str, catalog_path: str | None):
    """Print whether TEXT is allowed and whether it needs review."""
    result = _moderator(catalog_path).quick_check(text)
    allowed = "[green]yes[/]" if result.allowed else "[red]no[/]"
    review = "[yellow]yes[/]" if result.needs_review else "no"
    console.print(f"  Allowed: {allowed}")
    console.print(f"  Needs review: {review}")


# ── Normalize ────────────────────────────────────────────────────────


@main.command()
@click.argument("text")
def normalize(text: str):
    """Print the normalized form of TEXT as the matcher sees it."""
    from contentguard.text.normalizer import normalize as normalize_text

    click.echo(normalize_text(text))


# ── Catalog ──────────────────────────────────────────────────────────


@main.command()
@click.option("--catalog", "catalog_path", default=None, help="Path to a term catalog YAML/JSON file")
def catalog(catalog_path: str | None):
    """Show term counts for the active catalog."""
    from contentguard.catalog.catalog import load_catalog

    summary = load_catalog(catalog_path or get_settings().catalog_path).summary()

    table = Table(title=f"Term Catalog ({summary.pop('source')})")
    table.add_column("List", style="cyan")
    table.add_column("Entries", justify="right")
    degraded = summary.pop("degraded")
    for name, count in summary.items():
        table.add_row(name, str(count))
    console.print(table)

    if degraded:
        console.print("[red]DEGRADED[/] catalog failed to load; fallback critical terms only")
    else:
        console.print("[green]OK[/] catalog loaded")


# ── Schema ───────────────────────────────────────────────────────────


@main.command(name="schema")
def dump_schema():
    """Print the JSON Schema for the term catalog document."""
    from contentguard.catalog.schema import get_schema

    click.echo(json.dumps(get_schema(), indent=2))


if __name__ == "__main__":
    main()
