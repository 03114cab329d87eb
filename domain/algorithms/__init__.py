"""
Cryptographic algorithm taxonomy: registry, normalization, and classification.

All functions in this module are pure (no file I/O).
"""

from domain.algorithms.catalog import BUILTIN_TABLE, DEFAULT_REGISTRY
from domain.algorithms.classifier import Classifier, classify, is_weak
from domain.algorithms.loader import parse_registry_config
from domain.algorithms.models import AlgorithmCategory, AlgorithmIdentity, CanonicalAlgorithm
from domain.algorithms.normalizer import drop_mode_suffix, normalize_name, strip_separators
from domain.algorithms.registry import CATEGORY_ORDER, RegistryIntegrityError, TaxonomyRegistry, build_registry

__all__ = [
    # Classification (most commonly used)
    "Classifier",
    "classify",
    "is_weak",
    # Value types
    "AlgorithmCategory",
    "CanonicalAlgorithm",
    "AlgorithmIdentity",
    # Registry
    "TaxonomyRegistry",
    "RegistryIntegrityError",
    "CATEGORY_ORDER",
    "build_registry",
    "BUILTIN_TABLE",
    "DEFAULT_REGISTRY",
    "parse_registry_config",
    # Normalization
    "normalize_name",
    "strip_separators",
    "drop_mode_suffix",
]
