"""Output schemas for API commands.

Importing this package registers every command's output model.
"""

from . import config, scan  # noqa: F401
from ._base import BaseOutputSchema
from ._registry import get_output_schema, output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "output_schema"]
