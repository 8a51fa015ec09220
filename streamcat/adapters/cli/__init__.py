"""Interface en ligne de commande (typer + rich)."""

from .commands import catalog, favorites

__all__ = ["catalog", "favorites"]
