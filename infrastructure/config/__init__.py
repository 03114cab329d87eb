"""
Configuration management: models, loading, and validation.

Handles:
- ScanConfig: Main scan configuration
- Taxonomy registry loading from YAML
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import (
    load_registry_config,
    load_scan_config,
)
from infrastructure.config.models import (
    # Column mapping
    ScanColumnsConfig,
    # Main config
    ScanConfig,
)

__all__ = [
    # Main config (most commonly used)
    "ScanConfig",
    "load_scan_config",
    # Data columns
    "ScanColumnsConfig",
    # Loaders
    "load_registry_config",
]
