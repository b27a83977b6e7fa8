"""Scan configuration Pydantic model."""

from pydantic import BaseModel, ConfigDict, Field


class ScanConfig(BaseModel):
    """Traversal settings shared by every scan."""

    model_config = ConfigDict(extra="forbid")

    max_workers: int | None = Field(
        None, ge=1, description="Upper bound on concurrent workers in parallel mode; null uses the executor default"
    )
    follow_symlinks: bool = Field(False, description="Descend into directory links and count linked files")
    default_pattern: str = Field("*", min_length=1, description="File name glob used when none is given")
