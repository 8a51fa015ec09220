"""
Tests unitaires pour le chargement du catalogue JSON.

Tests couvrant:
- Catalogue embarque (nombre d'entrees, partition, mises en avant)
- Generation de l'adresse du lecteur embarque
- Normalisation du casting (ancien format texte)
- Erreurs de format
"""

import json

import pytest

from streamcat.adapters.catalog_loader import (
    DEFAULT_CATALOG_FILE,
    content_from_dict,
    generate_embed,
    load_catalog_file,
    normalize_person,
)
from streamcat.core.entities import (
    Classification,
    ContentType,
    MovieDetail,
    Person,
    SeriesDetail,
)
from streamcat.core.exceptions import CatalogFormatError
from streamcat.utils.constants import PLACEHOLDER_PHOTO
from tests.fixtures.content import catalog_item


class TestBundledCatalog:
    """Catalogue fourni avec l'application."""

    @pytest.fixture(scope="class")
    def contents(self):
        return load_catalog_file()

    def test_bundled_file_exists(self):
        assert DEFAULT_CATALOG_FILE.is_file()

    def test_entry_count(self, contents):
        assert len(contents) == 21

    def test_partition(self, contents):
        movies = [c for c in contents if c.type is ContentType.MOVIE]
        series = [c for c in contents if c.type is ContentType.SERIES]
        assert len(movies) == 13
        assert len(series) == 8

    def test_featured(self, contents):
        featured = [c.id for c in contents if c.featured]
        assert len(featured) == 6
        assert "tt13443470" in featured

    def test_unique_ids(self, contents):
        ids = [c.id for c in contents]
        assert len(ids) == len(set(ids))

    def test_embed_generated(self, contents):
        by_id = {c.id: c for c in contents}
        assert by_id["tt0903747"].embed == "https://embed.warezcdn.link/serie/tt0903747"

    def test_free_classification(self, contents):
        assert any(c.classification is Classification.FREE for c in contents)

    def test_cast_normalized(self, contents):
        """Chaque membre du casting a un nom et une photo."""
        for content in contents:
            for person in content.cast:
                assert person.name
                assert person.photo


class TestGenerateEmbed:
    def test_movie(self):
        assert generate_embed("tt5950044", ContentType.MOVIE) == (
            "https://embed.warezcdn.link/filme/tt5950044"
        )

    def test_series_string(self):
        assert generate_embed("tt0903747", "series", "https://player.example/") == (
            "https://player.example/serie/tt0903747"
        )


class TestNormalizePerson:
    def test_legacy_string_format(self):
        """Un simple nom recoit l'image de remplacement."""
        assert normalize_person("Jenna Ortega") == Person("Jenna Ortega", PLACEHOLDER_PHOTO)

    def test_canonical_format(self):
        person = normalize_person({"name": "Jenna Ortega", "photo": "https://img/j.jpg"})
        assert person == Person("Jenna Ortega", "https://img/j.jpg")

    def test_missing_photo(self):
        assert normalize_person({"name": "X"}).photo == PLACEHOLDER_PHOTO

    def test_missing_name(self):
        with pytest.raises(CatalogFormatError):
            normalize_person({"photo": "https://img/j.jpg"}, "tt1")

    def test_invalid_type(self):
        with pytest.raises(CatalogFormatError):
            normalize_person(42, "tt1")


class TestContentFromDict:
    def test_movie(self):
        content = content_from_dict(catalog_item("m1", "movie", featured=True))
        assert isinstance(content.detail, MovieDetail)
        assert content.detail.duration == "100 min"
        assert content.detail.directors[0].name == "Bob Director"
        assert content.featured is True
        assert content.embed.endswith("/filme/m1")

    def test_series(self):
        content = content_from_dict(catalog_item("s1", "series"))
        assert isinstance(content.detail, SeriesDetail)
        assert content.detail.seasons == 1
        assert content.detail.episodes == 8

    def test_full_description_defaults(self):
        """fullDescription reprend description si absente."""
        content = content_from_dict(catalog_item("s1", "series"))
        assert content.full_description == "Synopsis s1"

    def test_provided_embed_kept(self):
        raw = {**catalog_item("m1", "movie"), "embed": "https://custom/player/m1"}
        assert content_from_dict(raw).embed == "https://custom/player/m1"

    def test_mixed_cast(self):
        raw = {**catalog_item("m1", "movie"), "cast": ["Legacy Name", {"name": "New"}]}
        content = content_from_dict(raw)
        assert [p.name for p in content.cast] == ["Legacy Name", "New"]
        assert all(p.photo == PLACEHOLDER_PHOTO for p in content.cast)

    @pytest.mark.parametrize("alias", ["Free", "Livre", "L"])
    def test_free_classification(self, alias):
        raw = {**catalog_item("m1", "movie"), "classification": alias}
        assert content_from_dict(raw).classification is Classification.FREE

    def test_missing_required_field(self):
        raw = catalog_item("m1", "movie")
        del raw["title"]
        with pytest.raises(CatalogFormatError, match="title"):
            content_from_dict(raw)

    def test_unknown_type(self):
        raw = {**catalog_item("d1", "movie"), "type": "documentary"}
        with pytest.raises(CatalogFormatError):
            content_from_dict(raw)

    def test_unknown_classification(self):
        raw = {**catalog_item("m1", "movie"), "classification": "21+"}
        with pytest.raises(CatalogFormatError):
            content_from_dict(raw)

    def test_invalid_seasons(self):
        raw = {**catalog_item("s1", "series"), "seasons": "beaucoup"}
        with pytest.raises(CatalogFormatError):
            content_from_dict(raw)


class TestLoadCatalogFile:
    def test_custom_file(self, catalog_file):
        contents = load_catalog_file(catalog_file, embed_base_url="https://player.example")
        assert [c.id for c in contents] == ["m1", "s1"]
        assert contents[0].embed == "https://player.example/filme/m1"

    def test_root_not_a_list(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"id": "m1"}), encoding="utf-8")
        with pytest.raises(CatalogFormatError):
            load_catalog_file(path)
