"""
Utilitaires et constantes pour StreamCat.
"""

from streamcat.utils.constants import (
    EMBED_PATH_SEGMENTS,
    FREE_CLASSIFICATION_ALIASES,
    PLACEHOLDER_PHOTO,
)

__all__ = [
    "EMBED_PATH_SEGMENTS",
    "FREE_CLASSIFICATION_ALIASES",
    "PLACEHOLDER_PHOTO",
]
