"""
Couche application (cas d'utilisation).

- CatalogService : listing, détail, identité de démonstration, favoris
"""

from streamcat.services.catalog import CatalogService

__all__ = ["CatalogService"]
