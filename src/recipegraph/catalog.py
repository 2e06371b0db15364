"""Drug catalog: records, case-insensitive lookup, and recipe parsing.

The catalog is read-only input to the resolver. It can be built from
DrugRecord values directly, from row mappings using the source data's
field names, or loaded from a JSON file.

Example:
    >>> catalog = Catalog([DrugRecord("Speed", "Caffeine + Sugar")])
    >>> catalog.find("speed").recipe_text
    'Caffeine + Sugar'
    >>> parse_recipe("Caffeine + Sugar")
    ['Caffeine', 'Sugar']
"""

from __future__ import annotations

import json
import logging
import math
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from recipegraph.exceptions import CatalogError

logger = logging.getLogger(__name__)

# Field names used by the source data.json rows
NAME_FIELD = "Drug Name"
RECIPE_FIELD = "Recipe"
PRICE_FIELD = "Price"
EFFECTS_FIELD = "Effects"
ADDICTIVENESS_FIELD = "Addictiveness"

# Placeholder the source data uses for missing cells
MISSING_PLACEHOLDER = "NaN"

_SEPARATOR_RE = re.compile(r"\s*\+\s*")


def parse_recipe(recipe_text: str | None) -> list[str]:
    """Split recipe text into ordered component names.

    Components are separated by ``+`` with optional surrounding whitespace.
    Empty, missing, or ``"NaN"`` recipes have no components.

    Example:
        >>> parse_recipe(" Bleach +  Water + ")
        ['Bleach', 'Water']
        >>> parse_recipe("NaN")
        []
    """
    if not recipe_text or recipe_text == MISSING_PLACEHOLDER:
        return []
    return [token.strip() for token in _SEPARATOR_RE.split(recipe_text) if token.strip()]


@dataclass(frozen=True)
class DrugRecord:
    """One catalog entry."""

    name: str
    recipe_text: str | None = None
    price: float | None = None
    effects: str | None = None
    addictiveness: float | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> DrugRecord:
        """Build a record from a source row (``"Drug Name"``, ``"Recipe"``, ...)."""
        return cls(
            name=str(row[NAME_FIELD]).strip(),
            recipe_text=_coerce_text(row.get(RECIPE_FIELD)),
            price=_coerce_number(row.get(PRICE_FIELD)),
            effects=_coerce_text(row.get(EFFECTS_FIELD)),
            addictiveness=_coerce_number(row.get(ADDICTIVENESS_FIELD)),
        )


def _coerce_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if value == MISSING_PLACEHOLDER:
        return None
    return str(value)


def _coerce_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().lstrip("$")
        if not value or value == MISSING_PLACEHOLDER:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


class Catalog:
    """Ordered, read-only collection of drug records.

    Lookup is a case-insensitive exact match on ``name``. When several
    records differ only by case, the first one in catalog order wins and a
    warning is logged once when the catalog is built.

    Args:
        records: Records in catalog order.
    """

    def __init__(self, records: Iterable[DrugRecord] = ()) -> None:
        self._records: tuple[DrugRecord, ...] = tuple(records)
        self._index: dict[str, DrugRecord] = {}
        for record in self._records:
            key = record.name.lower()
            if key in self._index:
                logger.warning(
                    "Duplicate drug name %r (already have %r); keeping the first",
                    record.name,
                    self._index[key].name,
                )
                continue
            self._index[key] = record

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]]) -> Catalog:
        """Build a catalog from source rows, skipping rows without a name."""
        records = []
        for position, row in enumerate(rows):
            name = row.get(NAME_FIELD) if isinstance(row, Mapping) else None
            if name is None or not str(name).strip():
                logger.warning("Skipping catalog row %d: no %r field", position, NAME_FIELD)
                continue
            records.append(DrugRecord.from_row(row))
        return cls(records)

    def find(self, name: str) -> DrugRecord | None:
        """Return the record whose name matches case-insensitively, or None."""
        return self._index.get(name.lower())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._index

    def __iter__(self) -> Iterator[DrugRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"Catalog({len(self._records)} records)"

    def names(self) -> list[str]:
        """Record names sorted case-insensitively, as a drug selector lists them."""
        return sorted((record.name for record in self._records), key=str.lower)


def load_catalog(path: str | Path) -> Catalog:
    """Load a catalog from a JSON array of source rows.

    Raises:
        CatalogError: If the file is unreadable, not JSON, or not an array
            of objects.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise CatalogError(path, e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise CatalogError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e

    if not isinstance(data, list):
        raise CatalogError(path, f"expected a JSON array, got {type(data).__name__}")
    if not all(isinstance(row, dict) for row in data):
        raise CatalogError(path, "every catalog entry must be a JSON object")

    catalog = Catalog.from_rows(data)
    logger.debug("Loaded %d drug records from %s", len(catalog), path)
    return catalog
