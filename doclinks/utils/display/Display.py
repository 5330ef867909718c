"""Where command stages are shown."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Sink for the announce, progress, result and output stages of a command."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Show the command announcement."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Show the result line of a successful command."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Show the result line of a failed command.

        ``details`` in kwargs, when given, is shown below the message
        verbatim (resolver diagnostics, for instance).
        """

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Show a progress message."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Print the structured output; ``format`` in kwargs is "yaml" or "json"."""
