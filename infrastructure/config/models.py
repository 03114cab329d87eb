"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from domain.algorithms import DEFAULT_REGISTRY, AlgorithmCategory, TaxonomyRegistry
from infrastructure.constants import OUTPUT_ROOT


class ScanColumnsConfig(BaseModel):
    """Column name mapping for the candidate-names table."""

    # Raw algorithm name (always required)
    name_col: str

    # Location/context columns, carried into findings when present
    file_col: str | None = None
    line_col: str | None = None
    context_col: str | None = None

    @field_validator("file_col", "line_col", "context_col")
    @classmethod
    def _blank_to_none(cls, v: str | None) -> str | None:
        if v is not None and not str(v).strip():
            return None
        return v

    def location_cols(self) -> list[str]:
        return [c for c in (self.file_col, self.line_col, self.context_col) if c]


class ScanConfig(BaseModel):
    """
    Runtime configuration for one scan.
    - Loaded from scan.yaml
    - Validated and enriched by configuration loader (registry resolved from registry_file)
    - Consumed by the scan workflow and the CLI
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    input_file_path: Path = Field(..., description="Path to the candidate names table (Excel or CSV).")
    columns: ScanColumnsConfig

    # Reporting
    weak_only: bool = Field(
        default=True,
        description="If true, only weak algorithms are reported as findings.",
    )
    categories: list[AlgorithmCategory] | None = Field(
        default=None,
        description="Restrict findings to these categories. None means all categories.",
    )
    fail_on_weak: bool = Field(
        default=False,
        description="If true, the CLI exits with status 1 when any weak algorithm is found.",
    )
    output_root: Path = Field(default_factory=lambda: OUTPUT_ROOT)

    # Taxonomy (resolved by loader); None means the built-in catalog
    registry_file: Path | None = None
    registry: TaxonomyRegistry = Field(default_factory=lambda: DEFAULT_REGISTRY, exclude=True)

    @model_validator(mode="after")
    def _validate(self) -> "ScanConfig":
        if not str(self.columns.name_col).strip():
            raise ValueError("name_col is required in scan.yaml")

        if self.categories is not None and not self.categories:
            self.categories = None

        return self
