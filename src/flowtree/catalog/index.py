"""CatalogIndex and CatalogDefinitionEntry: the catalog index file model.

The index file lists one entry per catalog, each pointing at the JSON file
holding its definitions::

    {
        "name": "flow-catalog",
        "version": "4.5.0",
        "catalogs": {
            "actions":           {"name": "actions", "version": "4.5.0", "file": "actions.json"},
            "containers":        {...},
            "endpoints":         {...},
            "functions":         {...},
            "validationMatcher": {...}
        }
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["CATALOG_KEYS", "CatalogDefinitionEntry", "CatalogIndex"]

# Attribute name -> key used in the index file.
CATALOG_KEYS: dict[str, str] = {
    "actions": "actions",
    "containers": "containers",
    "endpoints": "endpoints",
    "functions": "functions",
    "validation_matcher": "validationMatcher",
}


@dataclass(frozen=True, slots=True)
class CatalogDefinitionEntry:
    """One catalog listed by the index.

    Attributes:
        name:    Catalog name.
        version: Catalog version string.
        file:    File name of the catalog, relative to the index file.
    """

    name: str
    version: str
    file: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CatalogDefinitionEntry:
        try:
            return cls(
                name=str(data["name"]),
                version=str(data.get("version", "")),
                file=str(data["file"]),
            )
        except (AttributeError, KeyError, TypeError) as exc:
            msg = f"Invalid catalog entry {data!r}: {exc}"
            raise ValueError(msg) from exc


@dataclass(frozen=True, slots=True)
class CatalogIndex:
    """The catalog index: the five catalogs a flow editor draws on."""

    name: str
    version: str
    actions: CatalogDefinitionEntry
    containers: CatalogDefinitionEntry
    endpoints: CatalogDefinitionEntry
    functions: CatalogDefinitionEntry
    validation_matcher: CatalogDefinitionEntry

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CatalogIndex:
        """Build an index from the parsed index file.

        Raises:
            ValueError: If a catalog entry is missing or malformed.
        """
        catalogs = data.get("catalogs")
        if not isinstance(catalogs, Mapping):
            msg = "Catalog index has no 'catalogs' mapping"
            raise ValueError(msg)

        entries: dict[str, CatalogDefinitionEntry] = {}
        for attr, key in CATALOG_KEYS.items():
            if key not in catalogs:
                msg = f"Catalog index is missing the {key!r} catalog"
                raise ValueError(msg)
            entries[attr] = CatalogDefinitionEntry.from_dict(catalogs[key])

        return cls(
            name=str(data.get("name", "")),
            version=str(data.get("version", "")),
            **entries,
        )
