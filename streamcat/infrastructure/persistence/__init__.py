"""
Module de persistance SQLite pour StreamCat.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine et initialisation des tables
- models.py : Modeles SQLModel representant les tables
- sqlmodel_storage.py : Implementation de IStorage

Usage:
    engine = init_db(create_db_engine("sqlite:///data/streamcat.db"))
    storage = SQLModelStorage(engine)
"""

from streamcat.infrastructure.persistence.database import (
    create_db_engine,
    init_db,
)
from streamcat.infrastructure.persistence.models import (
    ContentModel,
    UserListModel,
    UserModel,
)
from streamcat.infrastructure.persistence.sqlmodel_storage import SQLModelStorage

__all__ = [
    "create_db_engine",
    "init_db",
    "ContentModel",
    "UserModel",
    "UserListModel",
    "SQLModelStorage",
]
