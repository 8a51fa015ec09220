"""
Routes du catalogue : listing filtré et détail.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from ...services.catalog import CatalogService
from ..deps import get_catalog_service
from ..errors import server_errors
from ..serializers import content_to_json

router = APIRouter(prefix="/api/content", tags=["content"])


@router.get("")
async def list_content(
    type: Optional[str] = None,
    featured: Optional[str] = None,
    search: Optional[str] = None,
    service: CatalogService = Depends(get_catalog_service),
):
    """Liste le catalogue. search l'emporte sur type, qui l'emporte sur featured."""
    with server_errors("Failed to fetch content"):
        contents = await service.list_content(
            content_type=type,
            featured=featured == "true",
            # Une recherche vide est ignoree au niveau HTTP
            search=search or None,
        )
    return [content_to_json(content) for content in contents]


@router.get("/{content_id}")
async def get_content(
    content_id: str,
    service: CatalogService = Depends(get_catalog_service),
):
    """Détail d'un contenu (400 si ID vide, 404 si inconnu)."""
    with server_errors("Failed to fetch content"):
        content = await service.get_content(content_id)
    return content_to_json(content)
