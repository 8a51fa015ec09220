"""
Entités du catalogue.

Un contenu (film ou série) combine des champs communs et un détail
spécifique au type : MovieDetail (réalisateurs, durée) ou SeriesDetail
(créateur, saisons, épisodes). Le type est déduit du détail, il ne peut
donc pas contredire les champs renseignés.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

from streamcat.utils.constants import FREE_CLASSIFICATION_ALIASES, PLACEHOLDER_PHOTO


class ContentType(Enum):
    """Type de contenu.

    Valeurs:
        MOVIE: Film
        SERIES: Série
    """

    MOVIE = "movie"
    SERIES = "series"


class Classification(Enum):
    """Classification indicative (tranche d'âge)."""

    FREE = "L"
    TEN = "10+"
    TWELVE = "12+"
    FOURTEEN = "14+"
    SIXTEEN = "16+"
    EIGHTEEN = "18+"

    @classmethod
    def parse(cls, value: Union[str, "Classification"]) -> "Classification":
        """
        Convertit une valeur brute en Classification.

        Accepte "L", "Free" et "Livre" (insensible à la casse) pour la
        tranche tous publics.

        Raises:
            ValueError: Si la valeur ne correspond à aucune tranche
        """
        if isinstance(value, cls):
            return value
        raw = str(value).strip()
        if raw.lower() in FREE_CLASSIFICATION_ALIASES:
            return cls.FREE
        return cls(raw)


@dataclass(frozen=True)
class Person:
    """Membre du casting ou réalisateur, avec sa photo."""

    name: str
    photo: str = PLACEHOLDER_PHOTO


@dataclass(frozen=True)
class MovieDetail:
    """
    Détail spécifique aux films.

    Attributs:
        directors: Réalisateurs, dans l'ordre de crédit (peut être vide)
        duration: Durée affichable (ex: "108 min")
    """

    content_type: ClassVar[ContentType] = ContentType.MOVIE

    directors: tuple[Person, ...] = ()
    duration: Optional[str] = None


@dataclass(frozen=True)
class SeriesDetail:
    """
    Détail spécifique aux séries.

    Attributs:
        creator: Créateur(s) de la série
        creator_image: Photo du créateur
        seasons: Nombre de saisons
        episodes: Nombre total d'épisodes
    """

    content_type: ClassVar[ContentType] = ContentType.SERIES

    creator: Optional[str] = None
    creator_image: Optional[str] = None
    seasons: Optional[int] = None
    episodes: Optional[int] = None


ContentDetail = Union[MovieDetail, SeriesDetail]


@dataclass(frozen=True)
class Content:
    """
    Entrée du catalogue.

    Attributs:
        id: Identifiant externe stable (ex: identifiant IMDb "tt0903747")
        title: Titre affiché
        year: Année de sortie
        rating: Note encodée en texte (ex: "8.1"), opaque pour le stockage
        genre: Genre principal
        classification: Classification indicative
        detail: Détail film ou série
        cast: Casting, dans l'ordre de crédit
        description: Synopsis court
        full_description: Synopsis complet
        poster: URL de l'affiche
        backdrop: URL de l'image de fond
        embed: Adresse du lecteur embarqué
        featured: Éligible à la rotation de la page d'accueil
    """

    id: str
    title: str
    year: int
    rating: str
    genre: str
    classification: Classification
    detail: ContentDetail
    cast: tuple[Person, ...] = ()
    description: str = ""
    full_description: str = ""
    poster: str = ""
    backdrop: str = ""
    embed: str = ""
    featured: bool = False

    @property
    def type(self) -> ContentType:
        """Type déduit du détail."""
        return self.detail.content_type

    @property
    def numeric_rating(self) -> Optional[float]:
        """Note convertie en float, ou None si le texte n'est pas numérique."""
        try:
            return float(self.rating)
        except (TypeError, ValueError):
            return None

    def matches(self, query: str) -> bool:
        """
        Recherche par sous-chaîne, insensible à la casse.

        Compare avec le titre, le genre et le nom de chaque membre du casting.
        Une requête vide correspond à tout.
        """
        term = query.lower()
        if term in self.title.lower() or term in self.genre.lower():
            return True
        return any(term in person.name.lower() for person in self.cast)
