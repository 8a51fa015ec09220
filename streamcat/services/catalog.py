"""
Service du catalogue.

Couche application au-dessus de IStorage :
- priorité des filtres de listing (recherche > type > mise en avant)
- résolution de l'identité de démonstration
- résolution des favoris en contenus complets
- traduction des absences en exceptions du domaine
"""

from collections.abc import Iterable
from typing import Optional

from loguru import logger

from streamcat.core.entities.content import Content, ContentType
from streamcat.core.entities.user import User, UserListEntry
from streamcat.core.exceptions import (
    ContentNotFoundError,
    InvalidInputError,
    NotInListError,
)
from streamcat.core.ports.storage import IStorage


def _require_id(value: Optional[str], message: str) -> str:
    # Seul l'ID vide est invalide ; "   " est un ID inconnu (404)
    if not value:
        raise InvalidInputError(message)
    return str(value)


class CatalogService:
    """
    Cas d'utilisation du catalogue et des favoris.

    Example:
        service = CatalogService(storage, demo_username="demo", demo_password="demo")
        user = await service.resolve_demo_user()
        await service.add_favorite(user, "tt0903747")
    """

    def __init__(
        self,
        storage: IStorage,
        demo_username: str = "demo",
        demo_password: str = "demo",
    ) -> None:
        """
        Initialise le service.

        Args:
            storage: Stockage injecté (mémoire ou SQLite)
            demo_username: Nom de l'identité de démonstration
            demo_password: Mot de passe associé (opaque)
        """
        self._storage = storage
        self._demo_username = demo_username
        self._demo_password = demo_password

    @property
    def storage(self) -> IStorage:
        """Stockage sous-jacent."""
        return self._storage

    async def seed(self, contents: Iterable[Content]) -> int:
        """
        Amorce le catalogue s'il est vide.

        Un stockage persistant déjà rempli n'est pas réamorcé.

        Returns:
            Nombre de contenus insérés (0 si le catalogue existait)
        """
        existing = await self._storage.get_all_content()
        if existing:
            logger.info("Catalogue déjà présent, amorçage ignoré", count=len(existing))
            return 0
        count = await self._storage.load_catalog(contents)
        logger.info("Catalogue amorcé", count=count)
        return count

    # --- Catalogue ---

    async def list_content(
        self,
        content_type: Optional[str] = None,
        featured: bool = False,
        search: Optional[str] = None,
    ) -> list[Content]:
        """
        Liste le catalogue selon les filtres.

        La recherche est prioritaire, puis le type (movie/series uniquement,
        toute autre valeur est ignorée), puis la mise en avant.
        """
        if search is not None:
            return await self._storage.search_content(search)
        if content_type in (ContentType.MOVIE.value, ContentType.SERIES.value):
            return await self._storage.get_content_by_type(ContentType(content_type))
        if featured:
            return await self._storage.get_featured_content()
        return await self._storage.get_all_content()

    async def get_content(self, content_id: Optional[str]) -> Content:
        """
        Récupère un contenu.

        Raises:
            InvalidInputError: ID vide
            ContentNotFoundError: ID inconnu
        """
        content_id = _require_id(content_id, "Invalid content ID")
        content = await self._storage.get_content_by_id(content_id)
        if content is None:
            raise ContentNotFoundError(content_id)
        return content

    # --- Identité ---

    async def resolve_demo_user(self) -> User:
        """Retourne l'utilisateur de démonstration, créé au premier appel."""
        return await self._storage.get_or_create_user(
            self._demo_username, self._demo_password
        )

    # --- Favoris ---

    async def get_favorites(self, user: User) -> list[Content]:
        """
        Retourne les favoris sous forme de contenus complets.

        Les références orphelines (contenu disparu) sont ignorées.
        """
        favorites = []
        for content_id in await self._storage.get_user_list(user.id):
            content = await self._storage.get_content_by_id(content_id)
            if content is not None:
                favorites.append(content)
            else:
                logger.debug("Favori orphelin ignoré", user_id=user.id, content_id=content_id)
        return favorites

    async def add_favorite(self, user: User, content_id: Optional[str]) -> UserListEntry:
        """
        Ajoute un favori.

        Raises:
            InvalidInputError: ID absent
            ContentNotFoundError: Contenu inconnu
            AlreadyInListError: Déjà dans la liste
        """
        content_id = _require_id(content_id, "Content ID is required")
        entry = await self._storage.add_to_user_list_if_absent(user.id, content_id)
        logger.info("Favori ajouté", user_id=user.id, content_id=content_id)
        return entry

    async def remove_favorite(self, user: User, content_id: Optional[str]) -> None:
        """
        Retire un favori.

        Raises:
            InvalidInputError: ID absent
            NotInListError: Le contenu n'était pas dans la liste
        """
        content_id = _require_id(content_id, "Invalid content ID")
        removed = await self._storage.remove_from_user_list(user.id, content_id)
        if not removed:
            raise NotInListError(user.id, content_id)
        logger.info("Favori retiré", user_id=user.id, content_id=content_id)
