"""Value types for the cryptographic algorithm taxonomy."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

SEPARATORS = ("-", "_", " ")

_CANONICAL_NAME_RE = re.compile(r"[A-Z0-9]+")


class AlgorithmCategory(str, Enum):
    """Partition of the taxonomy by cryptographic purpose."""

    HASHING = "Hashing"
    ENCRYPTION = "Encryption"
    PASSWORD_HASHING = "PasswordHashing"


class CanonicalAlgorithm(BaseModel):
    """A registry entry: canonical (already normalized) name tagged with category and strength."""

    model_config = ConfigDict(frozen=True)

    category: AlgorithmCategory
    name: str = Field(..., min_length=1, description="Upper-case alphanumeric name.")
    is_weak: bool

    @field_validator("name")
    @classmethod
    def _check_canonical(cls, v: str) -> str:
        if _CANONICAL_NAME_RE.fullmatch(v) is None:
            raise ValueError(f"Canonical name must be upper-case alphanumeric, got {v!r}")
        return v


class AlgorithmIdentity(BaseModel):
    """Result of a successful classification: a reference to one canonical entry."""

    model_config = ConfigDict(frozen=True)

    algorithm: CanonicalAlgorithm

    @property
    def category(self) -> AlgorithmCategory:
        return self.algorithm.category

    @property
    def name(self) -> str:
        return self.algorithm.name

    @property
    def is_weak(self) -> bool:
        return self.algorithm.is_weak

    def describe(self) -> str:
        """Short message fragment for findings, e.g. 'weak hashing algorithm MD5'."""
        strength = "weak" if self.is_weak else "strong"
        return f"{strength} {_CATEGORY_PHRASES[self.category]} algorithm {self.name}"


_CATEGORY_PHRASES: dict[AlgorithmCategory, str] = {
    AlgorithmCategory.HASHING: "hashing",
    AlgorithmCategory.ENCRYPTION: "encryption",
    AlgorithmCategory.PASSWORD_HASHING: "password hashing",
}
