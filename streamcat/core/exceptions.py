"""
Exceptions du domaine.

Hiérarchie unique enracinée sur StreamCatError. La couche web traduit chaque
classe en code HTTP ; les services et stockages ne connaissent pas HTTP.
"""

from typing import Optional


class StreamCatError(Exception):
    """Erreur de base de l'application."""

    code = "error"


class InvalidInputError(StreamCatError):
    """Champ obligatoire manquant ou vide."""

    code = "invalid_input"


class NotFoundError(StreamCatError):
    """Entité référencée inexistante."""

    code = "not_found"


class ContentNotFoundError(NotFoundError):
    """Contenu absent du catalogue."""

    def __init__(self, content_id: str) -> None:
        self.content_id = content_id
        super().__init__("Content not found")


class NotInListError(NotFoundError):
    """Le contenu n'est pas dans la liste de l'utilisateur."""

    code = "not_in_list"

    def __init__(self, user_id: str, content_id: str) -> None:
        self.user_id = user_id
        self.content_id = content_id
        super().__init__("Content not found in list")


class AlreadyInListError(StreamCatError):
    """
    Conflit : la paire (utilisateur, contenu) existe déjà.

    Distinct de InvalidInputError pour que le client puisse le traiter
    comme un succès silencieux s'il le souhaite.
    """

    code = "already_in_list"

    def __init__(self, user_id: str, content_id: str) -> None:
        self.user_id = user_id
        self.content_id = content_id
        super().__init__("Content already in list")


class DuplicateContentError(StreamCatError):
    """Identifiant de contenu déjà présent lors de l'amorçage du catalogue."""

    code = "duplicate_content"

    def __init__(self, content_id: str) -> None:
        self.content_id = content_id
        super().__init__(f"Identifiant de contenu en double : {content_id}")


class CatalogFormatError(StreamCatError):
    """Entrée du catalogue initial mal formée."""

    code = "catalog_format"

    def __init__(self, message: str, content_id: Optional[str] = None) -> None:
        self.content_id = content_id
        prefix = f"[{content_id}] " if content_id else ""
        super().__init__(f"{prefix}{message}")


class StorageError(StreamCatError):
    """Défaillance du backend de stockage (base indisponible, etc.)."""

    code = "server_error"
