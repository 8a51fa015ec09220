"""
Interface port pour le stockage.

Interface abstraite (port) définissant le contrat de lecture et d'écriture
sur le catalogue, les utilisateurs et les listes de favoris.
Les implémentations (adaptateurs) fournissent le mécanisme concret
(mémoire pour les tests et la démo, SQLite via SQLModel).

Toutes les opérations sont asynchrones : un backend base de données peut
ainsi introduire des points de suspension sans changer le contrat.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Optional, Union

from streamcat.core.entities.content import Content, ContentType
from streamcat.core.entities.user import User, UserListEntry


class IStorage(ABC):
    """
    Interface de stockage du catalogue et des favoris.

    Toutes les lectures "multiples" conservent l'ordre d'insertion.
    """

    # --- Utilisateurs ---

    @abstractmethod
    async def get_user(self, user_id: str) -> Optional[User]:
        """Récupère un utilisateur par son ID."""
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Récupère le premier utilisateur dont le nom correspond exactement (sensible à la casse)."""
        ...

    @abstractmethod
    async def create_user(self, username: str, password: str) -> User:
        """
        Crée un utilisateur avec un ID généré et une liste de favoris vide.

        L'unicité du nom n'est pas garantie par cette opération :
        l'appelant doit vérifier via get_user_by_username.
        """
        ...

    async def get_or_create_user(self, username: str, password: str) -> User:
        """
        Retourne l'utilisateur existant ou le crée.

        Résolution d'identité idempotente, appelée une fois par requête
        pour l'identité de démonstration.
        """
        user = await self.get_user_by_username(username)
        if user is None:
            user = await self.create_user(username, password)
        return user

    # --- Catalogue ---

    @abstractmethod
    async def load_catalog(self, contents: Iterable[Content]) -> int:
        """
        Amorce le catalogue, dans l'ordre fourni.

        Retourne :
            Le nombre de contenus ajoutés

        Raises:
            DuplicateContentError: Si un ID est déjà présent
        """
        ...

    @abstractmethod
    async def get_all_content(self) -> list[Content]:
        """Retourne tout le catalogue, dans l'ordre d'insertion."""
        ...

    @abstractmethod
    async def get_content_by_id(self, content_id: str) -> Optional[Content]:
        """Récupère un contenu par son ID, None s'il est inconnu."""
        ...

    @abstractmethod
    async def get_content_by_type(
        self, content_type: Union[ContentType, str]
    ) -> list[Content]:
        """Retourne les contenus du type donné."""
        ...

    @abstractmethod
    async def get_featured_content(self) -> list[Content]:
        """Retourne les contenus mis en avant (featured)."""
        ...

    @abstractmethod
    async def search_content(self, query: str) -> list[Content]:
        """
        Recherche par sous-chaîne insensible à la casse.

        Compare le titre, le genre et les noms du casting. La requête n'est
        pas nettoyée : une chaîne vide retourne tout le catalogue.
        """
        ...

    # --- Liste de favoris ---

    @abstractmethod
    async def get_user_list(self, user_id: str) -> list[str]:
        """Retourne les IDs de contenus favoris, dans l'ordre d'ajout."""
        ...

    @abstractmethod
    async def add_to_user_list(self, user_id: str, content_id: str) -> UserListEntry:
        """
        Ajoute un favori sans vérifier l'existence du contenu.

        Un appel répété crée une entrée en double, sauf sur un backend qui
        porte une contrainte d'unicité (user_id, content_id) : il lève alors
        AlreadyInListError. Préférer add_to_user_list_if_absent.
        """
        ...

    @abstractmethod
    async def add_to_user_list_if_absent(
        self, user_id: str, content_id: str
    ) -> UserListEntry:
        """
        Ajoute un favori de manière atomique.

        Raises:
            ContentNotFoundError: Si le contenu n'existe pas
            AlreadyInListError: Si la paire est déjà présente
        """
        ...

    @abstractmethod
    async def remove_from_user_list(self, user_id: str, content_id: str) -> bool:
        """Supprime un favori. Retourne True si une entrée a été supprimée."""
        ...

    @abstractmethod
    async def is_in_user_list(self, user_id: str, content_id: str) -> bool:
        """Vérifie si le contenu est dans la liste de l'utilisateur."""
        ...
