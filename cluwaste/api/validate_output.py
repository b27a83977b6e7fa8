"""Check a command's output dict against its registered model."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` for ``func`` and return it with defaults filled in.

    The model is found from where the command lives: ``cmd_scan`` in
    ``cluwaste.api.scan`` validates against the ``("scan", "scan")`` model.
    Functions without a registered model pass through unchanged.

    Raises:
        ValueError: If the output does not match the model
    """
    parts = func.__module__.split(".")
    if parts[:2] != ["cluwaste", "api"] or len(parts) < 3 or not func.__name__.startswith("cmd_"):
        return output

    domain, command = parts[2], func.__name__.removeprefix("cmd_")
    schema = get_output_schema(domain, command)
    if schema is None:
        return output

    try:
        return schema.model_validate(output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"{domain}.{command} output does not match {schema.__name__}: {e}") from e
