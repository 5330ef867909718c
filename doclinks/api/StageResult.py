"""Result of a doclinks command, consumed in four stages by the CLI."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands back to its caller.

    The caller prints ``announce``, drives ``progress_callback`` to the end
    (it fills in ``result``, ``output`` and ``success`` on the way), then
    reports the outcome and prints the structured output.
    """

    announce: str
    # Yields (fraction complete, message) and sets the remaining fields
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
