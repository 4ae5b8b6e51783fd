"""Immutable package catalog.

The catalog is built once (embedded defaults or a JSON file) and then shared
read-only by every estimate.
"""
import json
import logging
import math
import re
from pathlib import Path
from typing import Any, Iterable, Iterator

import dacite

from .exceptions import CatalogError
from .models import TravelPackage

DEFAULT_PACKAGES: tuple[dict[str, Any], ...] = (
    {"id": 1, "destination": "Kasauli", "durationDays": 4, "basePrice": 1200, "season": "Summer"},
    {"id": 2, "destination": "Chakrata", "durationDays": 3, "basePrice": 5000, "season": "Winter"},
    {"id": 3, "destination": "Amritsar", "durationDays": 2, "basePrice": 4100, "season": "Spring"},
)

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def _int_to_float(value: Any) -> Any:
    # only real numbers widen to float; strings and bools fall through to the type check
    if isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    return value


_DACITE_CONFIG = dacite.Config(type_hooks={float: _int_to_float}, strict=True)

logger = logging.getLogger(__name__)


class PackageCatalog:
    """Ordered, read-only collection of TravelPackage keyed by id."""

    def __init__(self, packages: Iterable[TravelPackage]):
        self._packages: tuple[TravelPackage, ...] = tuple(packages)
        self._by_id: dict[int, TravelPackage] = {}
        for package in self._packages:
            if package.id in self._by_id:
                raise CatalogError(f"Duplicate package id {package.id}")
            self._by_id[package.id] = package

    # ---------------- construction -----------------
    @staticmethod
    def _snake_case_keys(record: dict[str, Any]) -> dict[str, Any]:
        return {_CAMEL_BOUNDARY.sub('_', key).lower(): value for key, value in record.items()}

    @classmethod
    def _parse_package(cls, record: dict[str, Any]) -> TravelPackage:
        if not isinstance(record, dict):
            raise CatalogError(f"Package record must be an object, got {type(record).__name__}")
        try:
            package = dacite.from_dict(data_class=TravelPackage, data=cls._snake_case_keys(record),
                                       config=_DACITE_CONFIG)
        except (dacite.DaciteError, ValueError, TypeError) as e:
            raise CatalogError(f"Invalid package record {record}: {e}") from e
        if package.duration_days <= 0:
            raise CatalogError(f"Package {package.id} duration must be positive, got {package.duration_days}")
        if not math.isfinite(package.base_price) or package.base_price <= 0:
            raise CatalogError(f"Package {package.id} base price must be a positive finite number, got {package.base_price}")
        return package

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> 'PackageCatalog':
        return cls(cls._parse_package(record) for record in records)

    @classmethod
    def from_json(cls, path: Path) -> 'PackageCatalog':
        try:
            with open(path, 'rt', encoding='utf-8') as f:
                loaded_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e
        if isinstance(loaded_data, dict):
            loaded_data = loaded_data.get('packages', [])
        if not isinstance(loaded_data, list):
            raise CatalogError(f"Catalog {path} must hold a list of packages")
        catalog = cls.from_records(loaded_data)
        logger.debug("Loaded %d packages from %s", len(catalog), path)
        return catalog

    @classmethod
    def default(cls) -> 'PackageCatalog':
        return cls.from_records(DEFAULT_PACKAGES)

    # ---------------- lookup -----------------
    def get(self, package_id: int | float | None) -> TravelPackage | None:
        if package_id is None:
            return None
        return self._by_id.get(package_id)

    def first(self) -> TravelPackage | None:
        return self._packages[0] if self._packages else None

    def resolve(self, package_id: int | float | None) -> TravelPackage | None:
        """Package for package_id, falling back to the first entry; None only when the catalog is empty."""
        return self.get(package_id) or self.first()

    def __iter__(self) -> Iterator[TravelPackage]:
        return iter(self._packages)

    def __len__(self) -> int:
        return len(self._packages)

    def __contains__(self, package_id: object) -> bool:
        return package_id in self._by_id
