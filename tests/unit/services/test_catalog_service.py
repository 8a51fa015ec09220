"""
Tests unitaires pour CatalogService.

Tests couvrant:
- Priorite des filtres de listing (recherche > type > mise en avant)
- Detail d'un contenu (ID vide, inconnu)
- Amorcage du catalogue (ignore si deja present)
- Utilisateur de demonstration (creation unique)
- Favoris : ajout, doublon, retrait, references orphelines
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from streamcat.core.entities import ContentType, User
from streamcat.core.exceptions import (
    AlreadyInListError,
    ContentNotFoundError,
    InvalidInputError,
    NotInListError,
)
from streamcat.core.ports.storage import IStorage
from streamcat.infrastructure.memory import MemStorage
from streamcat.services.catalog import CatalogService


@pytest.fixture
def mock_storage() -> MagicMock:
    """Mock de IStorage, chaque requete retourne une liste vide."""
    mock = MagicMock(spec=IStorage)
    for name in (
        "get_all_content",
        "get_content_by_type",
        "get_featured_content",
        "search_content",
    ):
        setattr(mock, name, AsyncMock(return_value=[]))
    return mock


@pytest.fixture
def service(mem_storage) -> CatalogService:
    """Service sur un stockage memoire contenant m1 et s1."""
    return CatalogService(mem_storage, demo_username="demo", demo_password="demo")


class TestListContentPrecedence:
    """Priorite des filtres, verifiee sur le stockage mocke."""

    @pytest.mark.asyncio
    async def test_no_filter(self, mock_storage):
        await CatalogService(mock_storage).list_content()
        mock_storage.get_all_content.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_search_takes_precedence(self, mock_storage):
        await CatalogService(mock_storage).list_content(
            content_type="movie", featured=True, search="witcher"
        )
        mock_storage.search_content.assert_awaited_once_with("witcher")
        mock_storage.get_content_by_type.assert_not_called()
        mock_storage.get_featured_content.assert_not_called()

    @pytest.mark.asyncio
    async def test_type_before_featured(self, mock_storage):
        await CatalogService(mock_storage).list_content(content_type="series", featured=True)
        mock_storage.get_content_by_type.assert_awaited_once_with(ContentType.SERIES)
        mock_storage.get_featured_content.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_type_ignored(self, mock_storage):
        """Un type autre que movie/series est ignore, featured s'applique."""
        await CatalogService(mock_storage).list_content(content_type="anime", featured=True)
        mock_storage.get_content_by_type.assert_not_called()
        mock_storage.get_featured_content.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_featured_only(self, mock_storage):
        await CatalogService(mock_storage).list_content(featured=True)
        mock_storage.get_featured_content.assert_awaited_once()


class TestListContent:
    @pytest.mark.asyncio
    async def test_type_filter(self, service):
        contents = await service.list_content(content_type="movie")
        assert [c.id for c in contents] == ["m1"]

    @pytest.mark.asyncio
    async def test_featured_filter(self, service):
        contents = await service.list_content(featured=True)
        assert [c.id for c in contents] == ["m1"]


class TestGetContent:
    @pytest.mark.asyncio
    async def test_existing_content(self, service, series):
        assert await service.get_content("s1") == series

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content_id", [None, ""])
    async def test_empty_id(self, service, content_id):
        with pytest.raises(InvalidInputError, match="Invalid content ID"):
            await service.get_content(content_id)

    @pytest.mark.asyncio
    async def test_whitespace_id_is_unknown(self, service):
        """Un ID fait d'espaces n'est pas vide : il est simplement inconnu."""
        with pytest.raises(ContentNotFoundError):
            await service.get_content("   ")

    @pytest.mark.asyncio
    async def test_unknown_content(self, service):
        with pytest.raises(ContentNotFoundError, match="Content not found"):
            await service.get_content("nonexistent")


class TestSeed:
    @pytest.mark.asyncio
    async def test_seeds_empty_storage(self, small_catalog):
        service = CatalogService(MemStorage())
        assert await service.seed(small_catalog) == 2
        assert len(await service.list_content()) == 2

    @pytest.mark.asyncio
    async def test_existing_catalog_not_reseeded(self, service, witcher):
        assert await service.seed([witcher]) == 0
        assert [c.id for c in await service.list_content()] == ["m1", "s1"]


class TestDemoUser:
    @pytest.mark.asyncio
    async def test_created_once(self, service, mem_storage):
        first = await service.resolve_demo_user()
        second = await service.resolve_demo_user()

        assert first.id == second.id
        assert first.username == "demo"
        assert len(mem_storage._users) == 1

    @pytest.mark.asyncio
    async def test_configurable_username(self, mem_storage):
        service = CatalogService(mem_storage, demo_username="guest", demo_password="pw")
        user = await service.resolve_demo_user()
        assert user.username == "guest"
        assert user.password == "pw"

    @pytest.mark.asyncio
    async def test_single_storage_lookup(self, mock_storage):
        """La resolution delegue entierement a get_or_create_user."""
        demo = User(id="u1", username="demo", password="demo")
        mock_storage.get_or_create_user = AsyncMock(return_value=demo)
        mock_storage.get_user_by_username = AsyncMock()
        service = CatalogService(mock_storage)

        assert await service.resolve_demo_user() == demo
        mock_storage.get_or_create_user.assert_awaited_once_with("demo", "demo")
        mock_storage.get_user_by_username.assert_not_awaited()


class TestFavorites:
    @pytest.mark.asyncio
    async def test_add_and_read(self, service, movie):
        user = await service.resolve_demo_user()
        entry = await service.add_favorite(user, "m1")

        assert entry.content_id == "m1"
        assert await service.get_favorites(user) == [movie]

    @pytest.mark.asyncio
    async def test_add_missing_id(self, service):
        user = await service.resolve_demo_user()
        with pytest.raises(InvalidInputError, match="Content ID is required"):
            await service.add_favorite(user, None)

    @pytest.mark.asyncio
    async def test_add_unknown_content(self, service):
        user = await service.resolve_demo_user()
        with pytest.raises(ContentNotFoundError):
            await service.add_favorite(user, "nonexistent")

    @pytest.mark.asyncio
    async def test_add_duplicate(self, service):
        user = await service.resolve_demo_user()
        await service.add_favorite(user, "s1")
        with pytest.raises(AlreadyInListError):
            await service.add_favorite(user, "s1")

    @pytest.mark.asyncio
    async def test_remove(self, service):
        user = await service.resolve_demo_user()
        await service.add_favorite(user, "s1")
        await service.remove_favorite(user, "s1")
        assert await service.get_favorites(user) == []

    @pytest.mark.asyncio
    async def test_remove_absent(self, service):
        user = await service.resolve_demo_user()
        with pytest.raises(NotInListError, match="Content not found in list"):
            await service.remove_favorite(user, "m1")

    @pytest.mark.asyncio
    async def test_dangling_reference_skipped(self, service, mem_storage, series):
        """Un favori dont le contenu a disparu n'est pas retourne."""
        user = await service.resolve_demo_user()
        await mem_storage.add_to_user_list(user.id, "ghost")
        await mem_storage.add_to_user_list(user.id, "s1")

        assert await service.get_favorites(user) == [series]

    @pytest.mark.asyncio
    async def test_any_user(self, service):
        """Les favoris sont rattaches a l'utilisateur fourni."""
        other = User(id="u-other", username="other", password="x")
        await service.add_favorite(other, "m1")
        demo = await service.resolve_demo_user()
        assert await service.get_favorites(demo) == []
