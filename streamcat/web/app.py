"""
Application FastAPI de StreamCat.

Construit l'application autour d'un Container DI, amorce le catalogue au
démarrage et monte les routes de l'API.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .. import __version__
from ..container import Container
from .errors import register_error_handlers
from .routes.content import router as content_router
from .routes.health import router as health_router
from .routes.user_list import router as user_list_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Amorce le catalogue du stockage au démarrage."""
    container: Container = app.state.container
    service = container.catalog_service()
    await service.seed(container.catalog())
    logger.info(
        "API prête",
        backend=container.config().storage_backend,
    )
    yield


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit une application FastAPI.

    Args:
        container: Container DI à utiliser (un nouveau par défaut).
            Chaque application possède ainsi son propre stockage.
    """
    container = container or Container()

    app = FastAPI(title="StreamCat", version=__version__, lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=container.config().cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # Routes
    app.include_router(health_router)
    app.include_router(content_router)
    app.include_router(user_list_router)

    return app
