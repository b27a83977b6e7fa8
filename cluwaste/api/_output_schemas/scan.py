"""Output schemas for scan commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import output_schema


@output_schema("scan", "scan")
class ScanRunOutput(BaseOutputSchema):
    """Output schema for the scan command.

    Byte figures for the volume are zero when the scan never got past the
    disk geometry query.
    """

    root: str = Field(..., description="Absolute directory the scan started from")
    pattern: str = Field(..., description="File name glob applied to every directory")
    mode: str = Field(..., description="Traversal mode: parallel or sequential")
    cluster_size: int = Field(..., ge=0, description="Allocation unit of the volume in bytes")
    capacity_bytes: int = Field(..., ge=0, description="Total volume capacity in bytes")
    free_bytes: int = Field(..., ge=0, description="Free space on the volume in bytes")
    in_use_bytes: int = Field(..., ge=0, description="Allocated space on the volume in bytes")
    files_examined: int = Field(..., ge=0, description="Number of matching files measured")
    space_in_use: int = Field(..., ge=0, description="Sum of the lengths of the files measured")
    wasted_space: int = Field(..., ge=0, description="Sum of unused bytes in each file's final cluster")
    percent_wasted: float | None = Field(..., description="100 * wasted / in use, null when nothing is in use")
    elapsed_secs: float = Field(..., ge=0.0, description="Wall-clock time spent traversing")
    success: bool = Field(..., description="Whether the scan ran")
