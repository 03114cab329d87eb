"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- algorithms: Taxonomy registry, name normalization, and classification
"""

from domain.algorithms import AlgorithmCategory, AlgorithmIdentity, CanonicalAlgorithm, Classifier, classify

__all__ = [
    "Classifier",
    "classify",
    "AlgorithmCategory",
    "AlgorithmIdentity",
    "CanonicalAlgorithm",
]
