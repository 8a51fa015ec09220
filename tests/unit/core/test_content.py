"""
Tests unitaires pour les entites du catalogue.

Tests couvrant:
- Classification.parse (alias de la tranche tous publics)
- Type deduit du detail film/serie
- Conversion de la note
- Recherche par sous-chaine (titre, genre, casting)
"""

import dataclasses

import pytest

from streamcat.core.entities import (
    Classification,
    ContentType,
    MovieDetail,
    Person,
    SeriesDetail,
)
from streamcat.utils.constants import PLACEHOLDER_PHOTO
from tests.fixtures.content import make_movie, make_series


class TestClassification:
    """Tests de conversion des classifications."""

    @pytest.mark.parametrize("raw", ["L", "l", "Free", "FREE", "Livre", " livre "])
    def test_free_aliases(self, raw):
        """Les alias L, Free et Livre donnent la tranche tous publics."""
        assert Classification.parse(raw) is Classification.FREE

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("10+", Classification.TEN),
            ("12+", Classification.TWELVE),
            ("14+", Classification.FOURTEEN),
            ("16+", Classification.SIXTEEN),
            ("18+", Classification.EIGHTEEN),
        ],
    )
    def test_age_ratings(self, raw, expected):
        assert Classification.parse(raw) is expected

    def test_instance_returned_as_is(self):
        assert Classification.parse(Classification.EIGHTEEN) is Classification.EIGHTEEN

    def test_unknown_value_raises_value_error(self):
        with pytest.raises(ValueError):
            Classification.parse("21+")


class TestContentType:
    """Le type est deduit du detail."""

    def test_movie(self):
        assert make_movie().type is ContentType.MOVIE

    def test_series(self):
        assert make_series().type is ContentType.SERIES

    def test_type_follows_detail(self):
        """Remplacer le detail change le type, il ne peut pas diverger."""
        movie = make_movie()
        as_series = dataclasses.replace(movie, detail=SeriesDetail(seasons=1))
        assert as_series.type is ContentType.SERIES

    def test_content_is_frozen(self):
        movie = make_movie()
        with pytest.raises(dataclasses.FrozenInstanceError):
            movie.title = "Autre"


class TestNumericRating:
    """Conversion de la note texte."""

    def test_numeric_rating(self):
        assert make_movie(rating="8.1").numeric_rating == pytest.approx(8.1)

    def test_non_numeric_rating(self):
        assert make_movie(rating="N/A").numeric_rating is None


class TestPerson:
    def test_default_photo(self):
        assert Person("Anon").photo == PLACEHOLDER_PHOTO

    def test_movie_detail_without_director(self):
        assert MovieDetail().directors == ()


class TestMatches:
    """Recherche par sous-chaine insensible a la casse."""

    @pytest.fixture
    def content(self):
        return make_series(
            title="The Witcher",
            genre="Fantasia",
            cast=(Person("Henry Cavill"), Person("Anya Chalotra")),
        )

    def test_title(self, content):
        assert content.matches("witch")

    def test_genre(self, content):
        assert content.matches("FANTA")

    def test_cast(self, content):
        assert content.matches("cavill")

    def test_accents(self):
        """lower() Python gere les caracteres accentues."""
        content = make_movie(genre="Ação")
        assert content.matches("AÇÃO")

    def test_no_match(self, content):
        assert not content.matches("drama")

    def test_empty_query_matches_everything(self, content):
        assert content.matches("")
