"""Abstract symbol resolver."""

from abc import ABC, abstractmethod


class Resolver(ABC):
    """Oracle that maps symbol paths to documentation URLs.

    Implementations own all scoping and versioning rules; the link pipeline
    only relies on the ordering contract.
    """

    @abstractmethod
    def resolve(self, destinations: list[str]) -> list[str]:
        """Resolve symbol paths to absolute URLs.

        Args:
            destinations: Symbol paths as written in the chapters, e.g. ``std::option::Option``

        Returns:
            One absolute URL per destination, in the same order
        """
        pass
