"""
Route de santé (disponibilité du stockage).
"""

from fastapi import APIRouter, Depends

from ...services.catalog import CatalogService
from ..deps import get_catalog_service
from ..errors import server_errors

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
async def health(service: CatalogService = Depends(get_catalog_service)):
    """Retourne le nombre de contenus du catalogue."""
    with server_errors("Storage unavailable"):
        contents = await service.list_content()
    return {"status": "ok", "content": len(contents)}
