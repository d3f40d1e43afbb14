"""
PremiumCore Coverage Catalog

Read-only table of coverage types keyed by id. Built once and shared;
nothing mutates it after construction.
"""
from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from ..exceptions import UnknownCoverageType
from ..models import CoverageType


class CoverageCatalog:
    """
    Immutable mapping of coverage type id to CoverageType.

    Usage:
        catalog = get_default_catalog()
        life = catalog.lookup("life")

        if catalog.find("pet") is None:
            ...
    """

    __slots__ = ("_types", "version")

    def __init__(self, coverage_types: Iterable[CoverageType], version: str = "builtin") -> None:
        types: dict[str, CoverageType] = {}
        for coverage in coverage_types:
            if coverage.id in types:
                raise ValueError(f"Duplicate coverage type id: '{coverage.id}'")
            types[coverage.id] = coverage
        self._types = MappingProxyType(types)
        self.version = version

    def lookup(self, type_id: str) -> CoverageType:
        """
        Resolve a coverage type.

        Raises:
            UnknownCoverageType: If type_id is not in the catalog
        """
        coverage = self._types.get(type_id)
        if coverage is None:
            raise UnknownCoverageType(
                message=f"Unknown coverage type: '{type_id}'",
                details={"type_id": type_id, "known": sorted(self._types)},
            )
        return coverage

    def find(self, type_id: str) -> Optional[CoverageType]:
        """Resolve a coverage type, or None if unknown."""
        return self._types.get(type_id)

    def ids(self) -> list[str]:
        """Coverage type ids in catalog order."""
        return list(self._types)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._types

    def __iter__(self) -> Iterator[CoverageType]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"CoverageCatalog(version={self.version!r}, ids={self.ids()!r})"


@lru_cache(maxsize=1)
def get_default_catalog() -> CoverageCatalog:
    """The built-in catalog, constructed on first use."""
    from .builtin import BUILTIN_COVERAGE_TYPES

    return CoverageCatalog(BUILTIN_COVERAGE_TYPES)


def resolve_catalog(catalog: Optional[CoverageCatalog]) -> CoverageCatalog:
    """Use the given catalog, falling back to the built-in one."""
    return catalog if catalog is not None else get_default_catalog()
