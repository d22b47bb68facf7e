"""Command line interface for the hashtag creator.

Usage:
    ythashtags create "cooking pasta recipes" --niche cooking
    ythashtags tools
    ythashtags niches
    ythashtags serve
"""

from .app import app, main

__all__ = ["app", "main"]
