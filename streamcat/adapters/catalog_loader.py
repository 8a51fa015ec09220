"""
Chargement du catalogue initial depuis un fichier JSON.

Le fichier contient une liste d'objets au format de l'API (clés camelCase).
Chaque entrée est convertie en entité Content :
- le type ("movie" / "series") choisit le détail MovieDetail ou SeriesDetail
- le casting accepte l'ancien format (simple nom) en plus de {name, photo}
- l'adresse du lecteur embarqué est générée si absente
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger

from streamcat.core.entities.content import (
    Classification,
    Content,
    ContentType,
    MovieDetail,
    Person,
    SeriesDetail,
)
from streamcat.core.exceptions import CatalogFormatError
from streamcat.utils.constants import EMBED_PATH_SEGMENTS, PLACEHOLDER_PHOTO

DEFAULT_CATALOG_FILE = Path(__file__).parent.parent / "data" / "catalog.json"
DEFAULT_EMBED_BASE_URL = "https://embed.warezcdn.link"

_REQUIRED_FIELDS = ("id", "title", "year", "rating", "genre", "classification", "type")


def generate_embed(
    content_id: str,
    content_type: Union[ContentType, str],
    base_url: str = DEFAULT_EMBED_BASE_URL,
) -> str:
    """
    Génère l'adresse du lecteur embarqué.

    Exemples :
        generate_embed("tt0903747", "series") -> ".../serie/tt0903747"
        generate_embed("tt5950044", "movie")  -> ".../filme/tt5950044"
    """
    type_value = content_type.value if isinstance(content_type, ContentType) else content_type
    segment = EMBED_PATH_SEGMENTS[type_value]
    return f"{base_url.rstrip('/')}/{segment}/{content_id}"


def normalize_person(raw: Any, content_id: Optional[str] = None) -> Person:
    """
    Convertit une entrée de casting en Person.

    {name, photo} est le format canonique ; une simple chaîne est l'ancien
    format et reçoit l'image de remplacement, comme une photo absente.
    """
    if isinstance(raw, str):
        name, photo = raw, None
    elif isinstance(raw, dict):
        name, photo = raw.get("name"), raw.get("photo")
    else:
        raise CatalogFormatError(f"Entrée de casting invalide : {raw!r}", content_id)

    if not name or not str(name).strip():
        raise CatalogFormatError("Nom de personne manquant", content_id)
    return Person(name=str(name).strip(), photo=photo or PLACEHOLDER_PHOTO)


def _people(raw: Any, content_id: str) -> tuple[Person, ...]:
    if not raw:
        return ()
    if not isinstance(raw, list):
        raise CatalogFormatError("Liste de personnes attendue", content_id)
    return tuple(normalize_person(item, content_id) for item in raw)


def _optional_int(raw: Any, field: str, content_id: str) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise CatalogFormatError(f"Entier attendu pour {field} : {raw!r}", content_id) from e


def content_from_dict(
    raw: dict[str, Any], embed_base_url: str = DEFAULT_EMBED_BASE_URL
) -> Content:
    """
    Construit une entité Content depuis un objet JSON.

    Raises:
        CatalogFormatError: Champ obligatoire manquant, type ou
            classification inconnus, valeur numérique invalide
    """
    content_id = raw.get("id")
    missing = [field for field in _REQUIRED_FIELDS if raw.get(field) in (None, "")]
    if missing:
        raise CatalogFormatError(
            f"Champs obligatoires manquants : {', '.join(missing)}", content_id
        )
    content_id = str(content_id)

    try:
        content_type = ContentType(raw["type"])
    except ValueError as e:
        raise CatalogFormatError(f"Type inconnu : {raw['type']!r}", content_id) from e

    try:
        classification = Classification.parse(raw["classification"])
    except ValueError as e:
        raise CatalogFormatError(
            f"Classification inconnue : {raw['classification']!r}", content_id
        ) from e

    if content_type is ContentType.MOVIE:
        detail = MovieDetail(
            directors=_people(raw.get("directors"), content_id),
            duration=raw.get("duration"),
        )
    else:
        detail = SeriesDetail(
            creator=raw.get("creator"),
            creator_image=raw.get("creatorImage"),
            seasons=_optional_int(raw.get("seasons"), "seasons", content_id),
            episodes=_optional_int(raw.get("episodes"), "episodes", content_id),
        )

    return Content(
        id=content_id,
        title=str(raw["title"]),
        year=_optional_int(raw["year"], "year", content_id),
        rating=str(raw["rating"]),
        genre=str(raw["genre"]),
        classification=classification,
        detail=detail,
        cast=_people(raw.get("cast"), content_id),
        description=raw.get("description") or "",
        full_description=raw.get("fullDescription") or raw.get("description") or "",
        poster=raw.get("poster") or "",
        backdrop=raw.get("backdrop") or "",
        embed=raw.get("embed") or generate_embed(content_id, content_type, embed_base_url),
        featured=bool(raw.get("featured", False)),
    )


def load_catalog_file(
    path: Optional[Path] = None, embed_base_url: str = DEFAULT_EMBED_BASE_URL
) -> list[Content]:
    """
    Charge le catalogue depuis un fichier JSON (fichier embarqué par défaut).

    Args:
        path: Fichier JSON contenant une liste d'entrées
        embed_base_url: Base des adresses de lecteur générées

    Returns:
        Les contenus, dans l'ordre du fichier

    Raises:
        CatalogFormatError: Si le fichier n'est pas une liste ou si une entrée est invalide
    """
    catalog_path = path or DEFAULT_CATALOG_FILE
    raw_items = json.loads(catalog_path.read_text(encoding="utf-8"))
    if not isinstance(raw_items, list):
        raise CatalogFormatError(f"Liste JSON attendue dans {catalog_path}")

    contents = [content_from_dict(item, embed_base_url) for item in raw_items]
    logger.debug("Catalogue lu", path=str(catalog_path), count=len(contents))
    return contents
