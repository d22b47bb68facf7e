"""CLI commands - create hashtags, inspect the catalog, serve RPC."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from ..config import get_settings
from ..constants import NICHE_TAG_COUNT, STYLE_TAG_COUNT
from ..errors import RequestValidationError
from ..hashtag import NICHE_HASHTAGS, STYLE_HASHTAGS, create_hashtags
from ..rpc import TOOL_SCHEMAS, serve_stdio
from .console import console, print_error, print_info
from .display import show_catalog_table, show_hashtag_result


def _load_keywords(path: Path) -> dict:
    """Load keyword analyzer output from a JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print_error("Could not read keywords file", {"path": str(path), "error": str(e)})
        raise typer.Exit(1)

    if not isinstance(data, dict):
        print_error("Keywords file must contain a JSON object", {"path": str(path)})
        raise typer.Exit(1)
    return data


def create(
    concept: str = typer.Argument(..., help="Video concept/topic"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Video title"),
    niche: Optional[str] = typer.Option(None, "--niche", "-n", help="Content niche"),
    style: Optional[str] = typer.Option(None, "--style", "-s", help="Content style"),
    audience: Optional[str] = typer.Option(None, "--audience", "-a", help="Target audience"),
    max_hashtags: Optional[int] = typer.Option(None, "--max", "-m", help="Maximum hashtags (capped at 15)"),
    trending: Optional[bool] = typer.Option(
        None, "--trending/--no-trending", help="Include year and viral hashtags"
    ),
    keywords_file: Optional[Path] = typer.Option(
        None, "--keywords-file", "-k", help="JSON keyword analyzer output", dir_okay=False
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
) -> None:
    """Create ranked YouTube hashtags for a video concept."""
    settings = get_settings()
    keywords = _load_keywords(keywords_file) if keywords_file else None

    try:
        result = create_hashtags({
            "concept": concept,
            "title": title,
            "keywords": keywords,
            "niche": niche or settings.default_niche,
            "contentStyle": style or settings.default_content_style,
            "targetAudience": audience,
            "maxHashtags": max_hashtags if max_hashtags is not None else settings.default_max_hashtags,
            "prioritizeTrending": trending if trending is not None else settings.prioritize_trending,
        })
    except RequestValidationError as e:
        print_error(str(e), {"field": e.field} if e.field else None)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    show_hashtag_result(console, result)


def tools() -> None:
    """Print the RPC tool schema as JSON."""
    typer.echo(json.dumps({"tools": TOOL_SCHEMAS}, indent=2, ensure_ascii=False))


def niches() -> None:
    """List supported niches and content styles with their hashtags."""
    show_catalog_table(console, "Niches", NICHE_HASHTAGS, NICHE_TAG_COUNT)
    show_catalog_table(console, "Content Styles", STYLE_HASHTAGS, STYLE_TAG_COUNT)


def serve() -> None:
    """Serve JSON-RPC requests over stdin/stdout, one message per line."""
    print_info("Serving JSON-RPC on stdio. Close stdin to stop.")
    handled = serve_stdio(sys.stdin, sys.stdout)
    print_info(f"Handled {handled} request(s).")
