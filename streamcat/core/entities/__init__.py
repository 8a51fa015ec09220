"""
Entités métier représentant les concepts du domaine.

Exports:
- Content: Entrée du catalogue (film ou série)
- ContentType, Classification: Énumérations du catalogue
- Person: Membre du casting ou réalisateur
- MovieDetail, SeriesDetail, ContentDetail: Détail spécifique au type
- User: Compte utilisateur
- UserListEntry: Favori d'un utilisateur
"""

from streamcat.core.entities.content import (
    Classification,
    Content,
    ContentDetail,
    ContentType,
    MovieDetail,
    Person,
    SeriesDetail,
)
from streamcat.core.entities.user import User, UserListEntry

__all__ = [
    "Classification",
    "Content",
    "ContentDetail",
    "ContentType",
    "MovieDetail",
    "Person",
    "SeriesDetail",
    "User",
    "UserListEntry",
]
