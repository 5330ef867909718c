"""Drive one command through its stages and exit with its status."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from doclinks.api.validate_output import validate_output
from doclinks.utils.display import Display

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
) -> None:
    """Run ``func`` and show announce, progress, result and output in order.

    Commands report their expected failures through their output schema, so
    anything raised here is a bug and is left to propagate. Exits 0 when the
    command succeeded and 1 otherwise.
    """
    result = func(*args, **kwargs)
    display.status(result.announce)

    for fraction, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] {message} ({fraction:.0%})")

    if not result.result:
        raise ValueError(f"{func.__name__} finished without setting a result message")
    if not result.output:
        raise ValueError(f"{func.__name__} finished without setting an output")

    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    display.json_output(result.output, format=display_format)
    sys.exit(0 if result.success else 1)
