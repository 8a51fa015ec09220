"""
Configuration de la base de donnees SQLite pour StreamCat.

Ce module fournit :
- Creation de l'engine a partir d'une URL (fichier ou memoire)
- Fonction d'initialisation des tables

L'URL est configuree via STREAMCAT_DATABASE_URL (defaut: sqlite:///data/streamcat.db).
"""

from pathlib import Path

from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine


def _is_memory_url(db_url: str) -> bool:
    return db_url == "sqlite://" or db_url.startswith("sqlite:///:memory:")


def create_db_engine(db_url: str) -> Engine:
    """
    Cree l'engine SQLAlchemy pour l'URL donnee.

    Pour un fichier SQLite, le repertoire parent est cree si necessaire.
    Une base en memoire partage une connexion unique (StaticPool), sinon
    chaque session verrait une base vide.
    """
    if _is_memory_url(db_url):
        return create_engine(
            db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    if db_url.startswith("sqlite:///"):
        db_path = Path(db_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(
        db_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def init_db(engine: Engine) -> Engine:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables absentes.

    Retourne :
        L'engine, pour chainer dans le container
    """
    # Import ici pour eviter les imports circulaires
    from streamcat.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    return engine
