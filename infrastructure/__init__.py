"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Candidate-table reading (CSV, Excel)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    ScanConfig,
    load_registry_config,
    load_scan_config,
)

__all__ = [
    "load_scan_config",
    "load_registry_config",
    "ScanConfig",
]
