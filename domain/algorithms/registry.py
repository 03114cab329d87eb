"""Immutable registry of canonical algorithm names."""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from domain.algorithms.models import AlgorithmCategory, CanonicalAlgorithm

logger = logging.getLogger(__name__)

# Fixed lookup order used by the classifier
CATEGORY_ORDER: tuple[AlgorithmCategory, ...] = (
    AlgorithmCategory.HASHING,
    AlgorithmCategory.ENCRYPTION,
    AlgorithmCategory.PASSWORD_HASHING,
)


class RegistryIntegrityError(ValueError):
    """Two entries of the same category share a canonical name."""


class TaxonomyRegistry:
    """
    Fixed set of canonical algorithms with exact-name lookup per category.

    The registry is validated once at construction and is read-only afterwards,
    so it can be shared freely between threads.

    Raises:
        RegistryIntegrityError: If a category contains the same name twice
    """

    def __init__(self, entries: Iterable[CanonicalAlgorithm]) -> None:
        by_category: dict[AlgorithmCategory, dict[str, CanonicalAlgorithm]] = {c: {} for c in CATEGORY_ORDER}
        for entry in entries:
            bucket = by_category[entry.category]
            if entry.name in bucket:
                raise RegistryIntegrityError(
                    f"Duplicate canonical name {entry.name!r} in category {entry.category.value}"
                )
            bucket[entry.name] = entry

        self._by_category: Mapping[AlgorithmCategory, Mapping[str, CanonicalAlgorithm]] = MappingProxyType(
            {c: MappingProxyType(names) for c, names in by_category.items()}
        )
        self._entries: tuple[CanonicalAlgorithm, ...] = tuple(
            e for c in CATEGORY_ORDER for e in self._by_category[c].values()
        )

        seen: dict[str, AlgorithmCategory] = {}
        for e in self._entries:
            if e.name in seen:
                logger.warning(
                    "Canonical name %s is registered under both %s and %s; %s wins on lookup.",
                    e.name,
                    seen[e.name].value,
                    e.category.value,
                    seen[e.name].value,
                )
            else:
                seen[e.name] = e.category

        logger.debug(
            "Built taxonomy registry: %s",
            {c.value: len(self._by_category[c]) for c in CATEGORY_ORDER},
        )

    @property
    def categories(self) -> tuple[AlgorithmCategory, ...]:
        return CATEGORY_ORDER

    def lookup(self, category: AlgorithmCategory, name: str) -> CanonicalAlgorithm | None:
        """Return the entry of `category` whose name equals `name` exactly, or None."""
        return self._by_category[category].get(name)

    def all_entries(self) -> tuple[CanonicalAlgorithm, ...]:
        return self._entries

    def entries_for(self, category: AlgorithmCategory) -> tuple[CanonicalAlgorithm, ...]:
        return tuple(self._by_category[category].values())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"TaxonomyRegistry({len(self._entries)} entries)"


def build_registry(table: Mapping[AlgorithmCategory, Mapping[str, Iterable[str]]]) -> TaxonomyRegistry:
    """
    Build a registry from a `{category: {"strong": [...], "weak": [...]}}` table.

    Names must already be canonical; use `parse_registry_config` for raw config data.
    """
    entries = []
    for category, groups in table.items():
        for strength, names in groups.items():
            if strength not in ("strong", "weak"):
                raise ValueError(f"Unknown strength group {strength!r} for category {category.value}")
            entries.extend(
                CanonicalAlgorithm(category=category, name=name, is_weak=(strength == "weak")) for name in names
            )
    return TaxonomyRegistry(entries)
