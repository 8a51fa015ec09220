"""
Modeles SQLModel pour la base de donnees StreamCat.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- content: Catalogue (films et series), ordre conserve via position
- users: Comptes utilisateurs (username unique)
- user_lists: Favoris, unique sur (user_id, content_id)

Les champs JSON (*_json) stockent les listes de personnes
({name, photo}) de maniere serialisee.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class ContentModel(SQLModel, table=True):
    """
    Modele representant une entree du catalogue.

    Les champs propres aux films (duration, directors_json) et aux series
    (creator, creator_image, seasons, episodes) sont nullables ; type
    indique lesquels sont significatifs.
    """

    __tablename__ = "content"

    id: str = Field(primary_key=True)
    position: int = Field(index=True)  # Ordre d'insertion
    type: str = Field(index=True)  # "movie" ou "series"
    title: str
    year: int
    rating: str
    genre: str
    classification: str
    duration: str | None = None
    seasons: int | None = None
    episodes: int | None = None
    directors_json: str | None = None  # JSON: [{"name": ..., "photo": ...}]
    creator: str | None = None
    creator_image: str | None = None
    cast_json: str = "[]"
    description: str = ""
    full_description: str = ""
    poster: str = ""
    backdrop: str = ""
    embed: str = ""
    featured: bool = Field(default=False, index=True)


class UserModel(SQLModel, table=True):
    """Modele representant un compte utilisateur."""

    __tablename__ = "users"

    id: str = Field(primary_key=True)
    username: str = Field(unique=True, index=True)
    password: str


class UserListModel(SQLModel, table=True):
    """
    Modele representant un favori.

    position est la cle auto-incrementee qui fixe l'ordre d'ajout ;
    id est l'identifiant expose.
    """

    __tablename__ = "user_lists"
    __table_args__ = (
        UniqueConstraint("user_id", "content_id", name="uq_user_lists_user_content"),
    )

    position: int | None = Field(default=None, primary_key=True)
    id: str = Field(unique=True, index=True)
    user_id: str = Field(foreign_key="users.id", index=True)
    content_id: str = Field(index=True)
    added_at: datetime
