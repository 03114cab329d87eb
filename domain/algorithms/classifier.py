"""Classification of raw algorithm names against the taxonomy registry."""

from domain.algorithms.catalog import DEFAULT_REGISTRY
from domain.algorithms.models import AlgorithmIdentity
from domain.algorithms.normalizer import normalize_name
from domain.algorithms.registry import TaxonomyRegistry


class Classifier:
    """
    Map raw algorithm names (e.g. string literals passed to crypto APIs) to registry entries.

    Only exact matches on a normalized form are accepted. Candidate forms are tried
    in order (separator-stripped first, then with the mode suffix dropped), and for
    each form the categories are searched in the registry's fixed order.
    """

    def __init__(self, registry: TaxonomyRegistry | None = None) -> None:
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

    def classify(self, raw_name: str) -> AlgorithmIdentity | None:
        """
        Classify a raw name; None means "nothing known", not an error.

        Examples:
            >>> Classifier().classify("md5").name
            'MD5'
            >>> Classifier().classify("AES-CBC").name
            'AES'
            >>> Classifier().classify("FOOBAR123") is None
            True
        """
        for form in normalize_name(raw_name):
            if not form:
                continue
            for category in self.registry.categories:
                entry = self.registry.lookup(category, form)
                if entry is not None:
                    return AlgorithmIdentity(algorithm=entry)
        return None

    @staticmethod
    def is_weak(identity: AlgorithmIdentity) -> bool:
        return identity.algorithm.is_weak


_default_classifier = Classifier()


def classify(raw_name: str) -> AlgorithmIdentity | None:
    """Classify against the built-in registry."""
    return _default_classifier.classify(raw_name)


def is_weak(identity: AlgorithmIdentity) -> bool:
    return Classifier.is_weak(identity)
