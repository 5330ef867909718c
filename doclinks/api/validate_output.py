"""Check command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas._registry import get_output_schema

_API_PREFIX = ("doclinks", "api")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` of ``doclinks.api.<domain>.cmd_<name>`` and fill in defaults.

    Functions outside the API, or commands without a registered schema, get
    their output back unchanged.

    Raises:
        ValueError: If the output does not match the schema
    """
    module_parts = tuple(func.__module__.split("."))
    if len(module_parts) < 3 or module_parts[:2] != _API_PREFIX or not func.__name__.startswith("cmd_"):
        return output

    domain, command_name = module_parts[2], func.__name__.removeprefix("cmd_")
    schema_class = get_output_schema(domain, command_name)
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"Output validation failed for {domain}.{command_name}: {e}\nGot output: {output}") from e
