"""
StreamCat - Catalogue de films et séries avec liste de favoris.

Ce package fournit un catalogue navigable (filtrage par type, mise en avant,
recherche plein texte) et une liste de favoris par utilisateur, exposés via
une API REST.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, exceptions)
- services/ : Couche application (cas d'utilisation)
- adapters/ : Chargement du catalogue initial
- infrastructure/ : Stockages concrets (mémoire, SQLite)
- web/ : API FastAPI
"""

__version__ = "0.1.0"
