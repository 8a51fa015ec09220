"""
Conversion des entités en JSON pour l'API.

Le format est plat et en camelCase : les champs qui ne concernent pas le
type du contenu (ex: seasons pour un film) valent null.
"""

from typing import Any

from streamcat.core.entities.content import Content, MovieDetail, Person
from streamcat.core.entities.user import UserListEntry


def person_to_json(person: Person) -> dict[str, str]:
    return {"name": person.name, "photo": person.photo}


def content_to_json(content: Content) -> dict[str, Any]:
    """Sérialise un contenu au format de l'API."""
    detail = content.detail
    is_movie = isinstance(detail, MovieDetail)
    return {
        "id": content.id,
        "title": content.title,
        "year": content.year,
        "rating": content.rating,
        "duration": detail.duration if is_movie else None,
        "seasons": None if is_movie else detail.seasons,
        "episodes": None if is_movie else detail.episodes,
        "genre": content.genre,
        "classification": content.classification.value,
        "directors": [person_to_json(p) for p in detail.directors] if is_movie else None,
        "creator": None if is_movie else detail.creator,
        "creatorImage": None if is_movie else detail.creator_image,
        "cast": [person_to_json(p) for p in content.cast],
        "description": content.description,
        "fullDescription": content.full_description,
        "poster": content.poster,
        "backdrop": content.backdrop,
        "embed": content.embed,
        "featured": content.featured,
        "type": content.type.value,
    }


def entry_to_json(entry: UserListEntry) -> dict[str, Any]:
    """Sérialise une entrée de favoris (date ISO-8601)."""
    return {
        "id": entry.id,
        "userId": entry.user_id,
        "contentId": entry.content_id,
        "addedAt": entry.added_at.isoformat(),
    }
