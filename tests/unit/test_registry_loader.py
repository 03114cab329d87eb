from pathlib import Path

import pytest
import yaml

from domain.algorithms import (
    DEFAULT_REGISTRY,
    AlgorithmCategory,
    RegistryIntegrityError,
    parse_registry_config,
)
from infrastructure.config import load_registry_config

REPO_ROOT = Path(__file__).resolve().parents[2]


def test_shipped_yaml_matches_builtin_catalog() -> None:
    registry = load_registry_config(REPO_ROOT / "configs" / "algorithms.yaml")
    assert set(registry.all_entries()) == set(DEFAULT_REGISTRY.all_entries())


def test_parse_normalizes_names() -> None:
    registry = parse_registry_config(
        {"algorithms": {"Hashing": {"strong": ["sha-256"], "weak": ["md 5"]}, "Encryption": {"weak": ["3des"]}}}
    )
    assert registry.lookup(AlgorithmCategory.HASHING, "SHA256").is_weak is False
    assert registry.lookup(AlgorithmCategory.HASHING, "MD5").is_weak is True
    assert registry.lookup(AlgorithmCategory.ENCRYPTION, "3DES") is not None


def test_parse_detects_spelling_variant_duplicates() -> None:
    with pytest.raises(RegistryIntegrityError):
        parse_registry_config({"algorithms": {"Hashing": {"strong": ["SHA256"], "weak": ["sha-256"]}}})


def test_parse_allows_empty_strength_group() -> None:
    registry = parse_registry_config({"algorithms": {"PasswordHashing": {"strong": ["BCRYPT"], "weak": None}}})
    assert len(registry) == 1


@pytest.mark.parametrize(
    ("data", "match"),
    [
        ({}, "non-empty mapping"),
        ({"algorithms": []}, "non-empty mapping"),
        ({"algorithms": {"Signing": {"strong": ["X"]}}}, "Unknown algorithm category"),
        ({"algorithms": {"Hashing": ["MD5"]}}, "must be a mapping"),
        ({"algorithms": {"Hashing": {"broken": ["MD5"]}}}, "unknown strength group"),
        ({"algorithms": {"Hashing": {"weak": "MD5"}}}, "must be a list"),
    ],
)
def test_parse_rejects_malformed_config(data: dict, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        parse_registry_config(data)


def test_load_registry_config_from_file(tmp_path: Path) -> None:
    path = tmp_path / "algorithms.yaml"
    path.write_text(
        yaml.safe_dump({"algorithms": {"Encryption": {"strong": ["CHACHA20"], "weak": ["RC4"]}}}),
        encoding="utf-8",
    )
    registry = load_registry_config(path)
    assert len(registry) == 2
    assert registry.lookup(AlgorithmCategory.ENCRYPTION, "CHACHA20").is_weak is False


def test_load_registry_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_registry_config(tmp_path / "nope.yaml")


def test_load_registry_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "algorithms.yaml"
    path.write_text("- MD5\n- SHA1\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Expected YAML dict"):
        load_registry_config(path)


@pytest.mark.parametrize("name", ["sha.1", "md5!", "rc4/40"])
def test_parse_rejects_names_that_are_not_alphanumeric(name: str) -> None:
    with pytest.raises(ValueError, match="alphanumeric"):
        parse_registry_config({"algorithms": {"Hashing": {"weak": [name]}}})
