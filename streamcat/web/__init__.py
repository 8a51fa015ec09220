"""Interface web (API REST) de StreamCat."""

from .app import create_app

__all__ = ["create_app"]
