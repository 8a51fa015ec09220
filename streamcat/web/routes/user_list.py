"""
Routes de la liste de favoris de l'utilisateur de démonstration.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from ...core.entities.user import User
from ...services.catalog import CatalogService
from ..deps import get_catalog_service, get_current_user
from ..errors import server_errors
from ..serializers import content_to_json, entry_to_json

router = APIRouter(prefix="/api/user-list", tags=["user-list"])


class AddToListRequest(BaseModel):
    """Corps de POST /api/user-list."""

    model_config = ConfigDict(populate_by_name=True)

    content_id: Optional[str] = Field(default=None, alias="contentId")


@router.get("")
async def get_user_list(
    user: User = Depends(get_current_user),
    service: CatalogService = Depends(get_catalog_service),
):
    """Favoris résolus en contenus complets."""
    with server_errors("Failed to fetch user list"):
        contents = await service.get_favorites(user)
    return [content_to_json(content) for content in contents]


@router.post("")
async def add_to_user_list(
    payload: Optional[AddToListRequest] = None,
    user: User = Depends(get_current_user),
    service: CatalogService = Depends(get_catalog_service),
):
    """Ajoute un favori (400 si absent ou déjà présent, 404 si contenu inconnu)."""
    content_id = payload.content_id if payload else None
    with server_errors("Failed to add content to list"):
        entry = await service.add_favorite(user, content_id)
    return entry_to_json(entry)


@router.delete("/{content_id}")
async def remove_from_user_list(
    content_id: str,
    user: User = Depends(get_current_user),
    service: CatalogService = Depends(get_catalog_service),
):
    """Retire un favori (404 s'il n'était pas dans la liste)."""
    with server_errors("Failed to remove content from list"):
        await service.remove_favorite(user, content_id)
    return {"success": True}
