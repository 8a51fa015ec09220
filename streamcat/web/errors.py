"""
Traduction des erreurs du domaine en réponses HTTP.

Corps d'erreur : {"message": ..., "code": ...}. Le conflit "déjà dans la
liste" reste un 400 mais avec son propre code, distinct de invalid_input.
"""

from collections.abc import Generator
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from streamcat.core.exceptions import (
    AlreadyInListError,
    InvalidInputError,
    NotFoundError,
    StorageError,
    StreamCatError,
)

# Ordre significatif : la premiere classe correspondante l'emporte
_STATUS_CODES: tuple[tuple[type[StreamCatError], int], ...] = (
    (InvalidInputError, 400),
    (AlreadyInListError, 400),
    (NotFoundError, 404),
    (StorageError, 500),
)


def status_for(error: StreamCatError) -> int:
    """Code HTTP associé à une erreur du domaine (500 par défaut)."""
    for error_cls, status_code in _STATUS_CODES:
        if isinstance(error, error_cls):
            return status_code
    return 500


def error_body(message: str, code: str) -> dict[str, str]:
    return {"message": message, "code": code}


@contextmanager
def server_errors(message: str) -> Generator[None, None, None]:
    """
    Convertit les pannes inattendues en StorageError portant le message de la route.

    Les erreurs du domaine (introuvable, conflit, saisie) passent telles quelles.

    Usage:
        with server_errors("Failed to fetch content"):
            contents = await service.list_content()
    """
    try:
        yield
    except StorageError as e:
        logger.error("{}: {}", message, e)
        raise StorageError(message) from e
    except StreamCatError:
        raise
    except Exception as e:
        logger.exception(message)
        raise StorageError(message) from e


async def _handle_domain_error(request: Request, exc: StreamCatError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.warning("Erreur serveur", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=status_code, content=error_body(str(exc), exc.code))


async def _handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug("Requete invalide", path=request.url.path, errors=str(exc.errors()))
    return JSONResponse(
        status_code=400,
        content=error_body("Invalid request", InvalidInputError.code),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Enregistre les gestionnaires d'erreurs sur l'application."""
    app.add_exception_handler(StreamCatError, _handle_domain_error)
    app.add_exception_handler(RequestValidationError, _handle_validation_error)
