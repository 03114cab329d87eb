from pathlib import Path

import pytest
import yaml

from domain.algorithms import DEFAULT_REGISTRY, AlgorithmCategory
from infrastructure.config import load_scan_config
from infrastructure.config.models import ScanColumnsConfig, ScanConfig
from infrastructure.constants import REGISTRY_FILE_ENV


def _write(path: Path, data: dict) -> Path:
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_blank_optional_columns_become_none() -> None:
    cfg = ScanConfig(
        input_file_path=Path("dataset/candidates.csv"),
        columns=ScanColumnsConfig(name_col="algorithm", file_col="  ", line_col="", context_col=None),
        categories=[],
    )

    assert cfg.columns.file_col is None
    assert cfg.columns.line_col is None
    assert cfg.columns.location_cols() == []
    assert cfg.categories is None
    assert cfg.registry is DEFAULT_REGISTRY


def test_snapshot_excludes_registry() -> None:
    cfg = ScanConfig(
        input_file_path=Path("dataset/candidates.csv"),
        columns=ScanColumnsConfig(name_col="algorithm"),
        categories=["Hashing"],
    )
    dumped = cfg.model_dump(mode="json")
    assert "registry" not in dumped
    assert dumped["categories"] == ["Hashing"]


def test_load_scan_config_uses_builtin_registry_by_default(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(REGISTRY_FILE_ENV, raising=False)
    path = _write(
        tmp_path / "scan.yaml",
        {"data_dir": str(tmp_path), "input_file": "names.csv", "name_col": "algo", "categories": ["Encryption"]},
    )
    cfg = load_scan_config(path)

    assert cfg.input_file_path == tmp_path / "names.csv"
    assert cfg.columns.name_col == "algo"
    assert cfg.weak_only is True
    assert cfg.fail_on_weak is False
    assert cfg.categories == [AlgorithmCategory.ENCRYPTION]
    assert cfg.registry_file is None
    assert cfg.registry is DEFAULT_REGISTRY


def test_env_var_overrides_registry_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    custom = _write(tmp_path / "custom.yaml", {"algorithms": {"Hashing": {"weak": ["MD5"]}}})
    monkeypatch.setenv(REGISTRY_FILE_ENV, str(custom))
    path = _write(
        tmp_path / "scan.yaml",
        {"input_file": "names.csv", "name_col": "algo", "registry_file": str(tmp_path / "missing.yaml")},
    )
    cfg = load_scan_config(path)

    assert cfg.registry_file == custom
    assert len(cfg.registry) == 1


@pytest.mark.parametrize(
    ("data", "match"),
    [
        ({"name_col": "algo"}, "input_file"),
        ({"input_file": "names.csv"}, "name_col"),
        ({"input_file": "names.csv", "name_col": "algo", "categories": "Hashing"}, "categories"),
    ],
)
def test_load_scan_config_rejects_incomplete_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, data: dict, match: str
) -> None:
    monkeypatch.delenv(REGISTRY_FILE_ENV, raising=False)
    path = _write(tmp_path / "scan.yaml", data)
    with pytest.raises(ValueError, match=match):
        load_scan_config(path)


def test_load_scan_config_rejects_unknown_category(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(REGISTRY_FILE_ENV, raising=False)
    path = _write(tmp_path / "scan.yaml", {"input_file": "names.csv", "name_col": "algo", "categories": ["Signing"]})
    with pytest.raises(ValueError):
        load_scan_config(path)


def test_blank_columns_are_normalized_on_the_columns_model() -> None:
    columns = ScanColumnsConfig(name_col="algorithm", file_col=" ", line_col="line")
    assert columns.file_col is None
    assert columns.line_col == "line"

    cfg = ScanConfig(input_file_path=Path("candidates.csv"), columns=columns)
    assert cfg.columns.location_cols() == ["line"]


def test_quoted_booleans_are_parsed(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(REGISTRY_FILE_ENV, raising=False)
    path = _write(
        tmp_path / "scan.yaml",
        {"input_file": "names.csv", "name_col": "algo", "weak_only": "false", "fail_on_weak": "true"},
    )
    cfg = load_scan_config(path)

    assert cfg.weak_only is False
    assert cfg.fail_on_weak is True
