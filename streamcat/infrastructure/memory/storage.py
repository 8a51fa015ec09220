"""
Implementation en memoire de IStorage.

Trois collections independantes :
- contenus indexes par ID
- utilisateurs indexes par ID
- entrees de favoris groupees par ID utilisateur

L'ordre d'insertion est celui des dict Python. Aucune integrite
referentielle entre collections : un content_id orphelin est tolere.
"""

import asyncio
import uuid
import weakref
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Optional, Union

from loguru import logger

from streamcat.core.entities.content import Content, ContentType
from streamcat.core.entities.user import User, UserListEntry
from streamcat.core.exceptions import (
    AlreadyInListError,
    ContentNotFoundError,
    DuplicateContentError,
)
from streamcat.core.ports.storage import IStorage


def _coerce_type(content_type: Union[ContentType, str]) -> Optional[ContentType]:
    """Convertit un type brut en ContentType, None si inconnu."""
    if isinstance(content_type, ContentType):
        return content_type
    try:
        return ContentType(content_type)
    except ValueError:
        return None


class MemStorage(IStorage):
    """
    Stockage en memoire du catalogue et des favoris.

    Les operations ne suspendent jamais la boucle d'evenements, sauf l'ajout
    atomique qui prend un verrou par utilisateur.

    Example:
        storage = MemStorage()
        await storage.load_catalog(contents)
        featured = await storage.get_featured_content()
    """

    def __init__(self, contents: Optional[Iterable[Content]] = None) -> None:
        """
        Initialise les collections, avec un catalogue optionnel.

        Args:
            contents: Contenus a inserer immediatement (ordre conserve)
        """
        self._users: dict[str, User] = {}
        self._content: dict[str, Content] = {}
        self._user_lists: dict[str, list[UserListEntry]] = {}
        # Verrou libere des que plus aucun ajout ne le reference
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )
        if contents is not None:
            self._insert_contents(contents)

    def _insert_contents(self, contents: Iterable[Content]) -> int:
        # Lot entier verifie avant insertion : un echec ne laisse rien
        batch: dict[str, Content] = {}
        for content in contents:
            if content.id in self._content or content.id in batch:
                raise DuplicateContentError(content.id)
            batch[content.id] = content
        self._content.update(batch)
        return len(batch)

    def _lock_for(self, user_id: str) -> asyncio.Lock:
        lock = self._locks.get(user_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[user_id] = lock
        return lock

    def _new_entry(self, user_id: str, content_id: str) -> UserListEntry:
        entry = UserListEntry(
            id=str(uuid.uuid4()),
            user_id=user_id,
            content_id=content_id,
            added_at=datetime.now(timezone.utc),
        )
        self._user_lists.setdefault(user_id, []).append(entry)
        return entry

    # --- Utilisateurs ---

    async def get_user(self, user_id: str) -> Optional[User]:
        """Recupere un utilisateur par son ID."""
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Recupere le premier utilisateur portant exactement ce nom."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def create_user(self, username: str, password: str) -> User:
        """Cree un utilisateur avec un UUID et une liste vide."""
        user = User(id=str(uuid.uuid4()), username=username, password=password)
        self._users[user.id] = user
        self._user_lists[user.id] = []
        logger.info("Utilisateur cree", user_id=user.id, username=username)
        return user

    # --- Catalogue ---

    async def load_catalog(self, contents: Iterable[Content]) -> int:
        """Amorce le catalogue dans l'ordre fourni."""
        count = self._insert_contents(contents)
        logger.debug("Catalogue charge en memoire", count=count)
        return count

    async def get_all_content(self) -> list[Content]:
        """Retourne tout le catalogue."""
        return list(self._content.values())

    async def get_content_by_id(self, content_id: str) -> Optional[Content]:
        """Recupere un contenu par son ID."""
        return self._content.get(content_id)

    async def get_content_by_type(
        self, content_type: Union[ContentType, str]
    ) -> list[Content]:
        """Retourne les contenus du type donne (vide pour un type inconnu)."""
        wanted = _coerce_type(content_type)
        if wanted is None:
            return []
        return [c for c in self._content.values() if c.type is wanted]

    async def get_featured_content(self) -> list[Content]:
        """Retourne les contenus mis en avant."""
        return [c for c in self._content.values() if c.featured]

    async def search_content(self, query: str) -> list[Content]:
        """Recherche par sous-chaine sur titre, genre et casting."""
        return [c for c in self._content.values() if c.matches(query)]

    # --- Liste de favoris ---

    async def get_user_list(self, user_id: str) -> list[str]:
        """Retourne les IDs favoris dans l'ordre d'ajout."""
        return [entry.content_id for entry in self._user_lists.get(user_id, [])]

    async def add_to_user_list(self, user_id: str, content_id: str) -> UserListEntry:
        """Ajoute un favori sans verification."""
        return self._new_entry(user_id, content_id)

    async def add_to_user_list_if_absent(
        self, user_id: str, content_id: str
    ) -> UserListEntry:
        """Ajoute un favori si le contenu existe et n'est pas deja present."""
        async with self._lock_for(user_id):
            if content_id not in self._content:
                raise ContentNotFoundError(content_id)
            if await self.is_in_user_list(user_id, content_id):
                raise AlreadyInListError(user_id, content_id)
            return self._new_entry(user_id, content_id)

    async def remove_from_user_list(self, user_id: str, content_id: str) -> bool:
        """Supprime toutes les entrees de la paire. Retourne True si au moins une."""
        entries = self._user_lists.get(user_id, [])
        kept = [entry for entry in entries if entry.content_id != content_id]
        if len(kept) == len(entries):
            return False
        self._user_lists[user_id] = kept
        return True

    async def is_in_user_list(self, user_id: str, content_id: str) -> bool:
        """Verifie la presence de la paire."""
        return any(
            entry.content_id == content_id
            for entry in self._user_lists.get(user_id, [])
        )
