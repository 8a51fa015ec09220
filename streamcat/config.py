"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe STREAMCAT_,
et peut optionnellement être fournie via un fichier .env.

Le stockage par défaut est en mémoire (rien n'est conservé entre deux démarrages).
Le backend SQLite est activé avec STREAMCAT_STORAGE_BACKEND=sqlite.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de streamcat/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

STORAGE_BACKENDS = ("memory", "sqlite")


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe STREAMCAT_.
    Exemple : STREAMCAT_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="STREAMCAT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Stockage
    storage_backend: str = Field(default="memory")
    database_url: str = Field(default="sqlite:///data/streamcat.db")

    # Catalogue initial (fichier JSON embarqué si non défini)
    catalog_file: Optional[Path] = Field(default=None)
    embed_base_url: str = Field(default="https://embed.warezcdn.link")

    # Identité de démonstration (pas d'authentification)
    demo_username: str = Field(default="demo", min_length=1)
    demo_password: str = Field(default="demo")

    # API
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/streamcat.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("catalog_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None:
            return None
        return Path(v).expanduser()

    @field_validator("storage_backend")
    @classmethod
    def check_backend(cls, v: str) -> str:
        """Normalise et valide le nom du backend de stockage."""
        backend = v.strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Backend de stockage inconnu : {v!r} (attendu : {', '.join(STORAGE_BACKENDS)})"
            )
        return backend

    @property
    def persistent(self) -> bool:
        """Vérifie si le stockage survit au redémarrage du processus."""
        return self.storage_backend == "sqlite"
