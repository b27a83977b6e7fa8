"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import output_schema


@output_schema("config", "show")
class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    section: str = Field(..., description="Section name, empty string if none provided (listing all sections)")
    content: dict[str, Any] = Field(
        ...,
        description="If section is empty: dict with 'sections' key listing section names; otherwise the section dict",
    )
    config_path: str = Field(..., description="Path to the configuration file")
