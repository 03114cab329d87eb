"""Configuration loading from YAML files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from domain.algorithms import DEFAULT_REGISTRY, TaxonomyRegistry, parse_registry_config
from infrastructure.config.models import ScanColumnsConfig, ScanConfig
from infrastructure.constants import DATA_DIR, OUTPUT_ROOT, REGISTRY_FILE_ENV

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_registry_config(path: Path) -> TaxonomyRegistry:
    """
    Load a taxonomy registry from YAML file.

    This function handles file I/O, then delegates parsing to domain layer.
    """
    data = _load_yaml(path)
    registry = parse_registry_config(data)
    logger.info("Loaded taxonomy registry from %s (%d entries)", path, len(registry))
    return registry


def load_scan_config(scan_path: Path) -> ScanConfig:
    """
    Load scan.yaml and construct a fully-resolved ScanConfig.

    Resolution rules:
    - input_file is relative to data_dir (default: dataset/).
    - The registry comes from $CRYPTO_TAXONOMY_FILE if set, else registry_file,
      else the built-in catalog.
    """
    exp = _load_yaml(scan_path)

    if "input_file" not in exp or not exp.get("input_file"):
        raise ValueError("scan.yaml missing required key: input_file")
    if "name_col" not in exp or not exp.get("name_col"):
        raise ValueError("scan.yaml missing required key: name_col")

    data_dir = Path(exp.get("data_dir", str(DATA_DIR)))
    output_root = Path(exp.get("output_root", str(OUTPUT_ROOT)))

    columns = ScanColumnsConfig(
        name_col=str(exp["name_col"]).strip(),
        file_col=exp.get("file_col"),
        line_col=exp.get("line_col"),
        context_col=exp.get("context_col"),
    )

    registry_file_raw = os.environ.get(REGISTRY_FILE_ENV) or exp.get("registry_file")
    registry_file = Path(registry_file_raw) if registry_file_raw else None
    if registry_file is not None:
        registry = load_registry_config(registry_file)
    else:
        logger.debug("No registry_file configured; using built-in taxonomy.")
        registry = DEFAULT_REGISTRY

    categories = exp.get("categories")
    if categories is not None and not isinstance(categories, list):
        raise ValueError("categories must be a list of category names")

    # Booleans are parsed by pydantic, so quoted "false" stays False
    flags = {key: exp[key] for key in ("weak_only", "fail_on_weak") if key in exp}

    cfg = ScanConfig(
        input_file_path=data_dir / exp["input_file"],
        columns=columns,
        categories=categories,
        **flags,
        output_root=output_root,
        registry_file=registry_file,
        registry=registry,
    )

    return cfg
