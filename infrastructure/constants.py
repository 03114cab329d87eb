from pathlib import Path

# Repo-root conventional directories/files (overrideable via scan.yaml)
CONFIG_DIR = Path("configs")
SCAN_FILE = CONFIG_DIR / "scan.yaml"
REGISTRY_FILE = CONFIG_DIR / "algorithms.yaml"

DATA_DIR = Path("dataset")
OUTPUT_ROOT = Path("outputs")

# Environment variable that overrides registry_file from scan.yaml
REGISTRY_FILE_ENV = "CRYPTO_TAXONOMY_FILE"
