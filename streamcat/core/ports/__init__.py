"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des données
- IStorage : Catalogue, utilisateurs et listes de favoris
"""

from streamcat.core.ports.storage import IStorage

__all__ = [
    "IStorage",
]
