"""Parse a taxonomy registry from a YAML dict."""

from typing import Any

from domain.algorithms.models import AlgorithmCategory, CanonicalAlgorithm
from domain.algorithms.normalizer import strip_separators
from domain.algorithms.registry import TaxonomyRegistry


def parse_registry_config(data: dict[str, Any]) -> TaxonomyRegistry:
    """
    Parse pre-loaded YAML dict into a TaxonomyRegistry.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in infrastructure.config.loader.

    Expected shape:
        algorithms:
          Hashing:
            strong: [SHA256, ...]
            weak: [MD5, ...]

    Names are upper-cased and stripped of separators, so "sha-256" and "SHA256"
    in one category are reported as duplicates.

    Args:
        data: Dictionary from yaml.safe_load()

    Returns:
        TaxonomyRegistry built from the file

    Raises:
        ValueError: If keys are missing, unknown, or have wrong types
        RegistryIntegrityError: If a category contains the same normalized name twice
    """
    algorithms = data.get("algorithms")
    if not isinstance(algorithms, dict) or not algorithms:
        raise ValueError("algorithms must be a non-empty mapping of category -> strength groups")

    entries: list[CanonicalAlgorithm] = []
    for category_raw, groups in algorithms.items():
        try:
            category = AlgorithmCategory(str(category_raw).strip())
        except ValueError as e:
            valid = [c.value for c in AlgorithmCategory]
            raise ValueError(f"Unknown algorithm category {category_raw!r}; expected one of {valid}") from e

        groups = groups or {}
        if not isinstance(groups, dict):
            raise ValueError(f"algorithms.{category.value} must be a mapping with 'strong'/'weak' lists")

        for strength, names in groups.items():
            if strength not in ("strong", "weak"):
                raise ValueError(f"algorithms.{category.value}: unknown strength group {strength!r}")
            names = names or []
            if not isinstance(names, list):
                raise ValueError(f"algorithms.{category.value}.{strength} must be a list")
            for name in names:
                entries.append(
                    CanonicalAlgorithm(
                        category=category,
                        name=strip_separators(str(name).strip().upper()),
                        is_weak=(strength == "weak"),
                    )
                )

    return TaxonomyRegistry(entries)
