"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Le stockage est choisi par configuration (memoire ou SQLite) ; aucune
instance globale n'existe en dehors d'un container.
"""

from dependency_injector import containers, providers

from .adapters.catalog_loader import load_catalog_file
from .config import Settings
from .infrastructure.memory import MemStorage
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.sqlmodel_storage import SQLModelStorage
from .services.catalog import CatalogService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Chaque container possede son propre stockage : deux applications
    construites avec deux containers ne partagent aucun etat.

    Utilisation :
        container = Container()
        service = container.catalog_service()
        await service.seed(container.catalog())
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Catalogue initial lu depuis le fichier JSON
    catalog = providers.Singleton(
        load_catalog_file,
        path=config.provided.catalog_file,
        embed_base_url=config.provided.embed_base_url,
    )

    # Engine SQLite - tables creees a la premiere utilisation
    database = providers.Singleton(
        init_db,
        engine=providers.Singleton(create_db_engine, config.provided.database_url),
    )

    # Stockage selon STREAMCAT_STORAGE_BACKEND
    storage = providers.Selector(
        config.provided.storage_backend,
        memory=providers.Singleton(MemStorage),
        sqlite=providers.Singleton(SQLModelStorage, engine=database),
    )

    # Service applicatif - Singleton pour partager le stockage entre requetes
    catalog_service = providers.Singleton(
        CatalogService,
        storage=storage,
        demo_username=config.provided.demo_username,
        demo_password=config.provided.demo_password,
    )
