"""Catalog subpackage: catalog index model and the default ActionCatalog.

Catalog *content* (the action definitions themselves) is supplied by the host
application; this package only reads and serves it.
"""

from flowtree.catalog.index import CatalogDefinitionEntry, CatalogIndex
from flowtree.catalog.service import CatalogSchemaService

__all__ = ["CatalogDefinitionEntry", "CatalogIndex", "CatalogSchemaService"]
