"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.discovery_commands import discover
from src.adapters.cli.commands.movie_commands import changes, find, info, search

__all__ = [
    "changes",
    "discover",
    "find",
    "info",
    "search",
]
