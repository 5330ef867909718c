"""Command output schemas keyed by (domain, command)."""

from pydantic import BaseModel

_SCHEMA_REGISTRY: dict[tuple[str, str], type[BaseModel]] = {}


def register_output_schema(domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
    """Register the schema that ``doclinks.api.<domain>.cmd_<command_name>`` output must match.

    Raises:
        ValueError: If the command already has a schema
    """
    key = (domain, command_name)
    if key in _SCHEMA_REGISTRY:
        raise ValueError(f"Schema already registered for {domain}.{command_name}")
    _SCHEMA_REGISTRY[key] = schema_class


def get_output_schema(domain: str, command_name: str) -> type[BaseModel] | None:
    """Return the registered schema, or None for commands without one."""
    return _SCHEMA_REGISTRY.get((domain, command_name))
