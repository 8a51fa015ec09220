"""
Fixtures pytest partagees pour les tests StreamCat.

Ce module contient les fixtures communes utilisees dans les tests:
- Contenus de reference (m1 film mis en avant, s1 serie, The Witcher, Breaking Bad)
- Stockage memoire pre-rempli
- Settings et Container de test avec chemins temporaires
"""

import json
from pathlib import Path

import pytest
from dependency_injector import providers

from streamcat.config import Settings
from streamcat.container import Container
from streamcat.core.entities import Content, Person
from streamcat.infrastructure.memory import MemStorage
from tests.fixtures.content import catalog_item, make_movie, make_series


@pytest.fixture
def movie() -> Content:
    """Film mis en avant (m1)."""
    return make_movie("m1", featured=True)


@pytest.fixture
def series() -> Content:
    """Serie non mise en avant (s1)."""
    return make_series("s1")


@pytest.fixture
def witcher() -> Content:
    return make_series(
        "tt5180504",
        title="The Witcher",
        genre="Fantasia",
        cast=(Person("Henry Cavill"), Person("Anya Chalotra")),
    )


@pytest.fixture
def breaking_bad() -> Content:
    return make_series(
        "tt0903747",
        title="Breaking Bad",
        genre="Drama",
        cast=(Person("Bryan Cranston"), Person("Aaron Paul")),
    )


@pytest.fixture
def small_catalog(movie, series) -> list[Content]:
    """Catalogue m1 (film, mis en avant) + s1 (serie)."""
    return [movie, series]


@pytest.fixture
def mem_storage(small_catalog) -> MemStorage:
    """Stockage memoire contenant m1 et s1."""
    return MemStorage(small_catalog)


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Fichier JSON de catalogue contenant m1 (film, mis en avant) et s1 (serie)."""
    path = tmp_path / "catalog.json"
    items = [catalog_item("m1", "movie", featured=True), catalog_item("s1", "series")]
    path.write_text(json.dumps(items), encoding="utf-8")
    return path


@pytest.fixture
def test_settings(tmp_path: Path, catalog_file: Path) -> Settings:
    """Settings de test : stockage memoire, catalogue m1/s1, logs temporaires."""
    return Settings(
        storage_backend="memory",
        catalog_file=catalog_file,
        log_file=tmp_path / "logs" / "streamcat.log",
    )


@pytest.fixture
def container(test_settings: Settings) -> Container:
    """Container isole utilisant les settings de test."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    return container
