"""Lookup from (domain, command) to output model."""

from collections.abc import Callable

from ._base import BaseOutputSchema

_SCHEMA_REGISTRY: dict[tuple[str, str], type[BaseOutputSchema]] = {}


def output_schema(domain: str, command: str) -> Callable[[type[BaseOutputSchema]], type[BaseOutputSchema]]:
    """Class decorator registering the output model of ``cmd_<command>`` in ``cluwaste.api.<domain>``."""

    def register(schema: type[BaseOutputSchema]) -> type[BaseOutputSchema]:
        if (domain, command) in _SCHEMA_REGISTRY:
            raise ValueError(f"Output schema already registered for {domain}.{command}")
        _SCHEMA_REGISTRY[(domain, command)] = schema
        return schema

    return register


def get_output_schema(domain: str, command: str) -> type[BaseOutputSchema] | None:
    return _SCHEMA_REGISTRY.get((domain, command))
