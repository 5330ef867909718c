"""Split the flat URL list back into per-chapter runs."""

from collections.abc import Sequence

from .OutputMismatchError import OutputMismatchError


def _split_urls(urls: Sequence[str], counts: Sequence[int]) -> list[list[str]]:
    """Partition ``urls`` into contiguous runs of the given sizes.

    ``counts`` must follow the same chapter order that was used to flatten
    the links, otherwise URLs end up in the wrong chapter.
    """
    if sum(counts) != len(urls):
        raise OutputMismatchError(f"expected {sum(counts)} resolved links, but found {len(urls)}")

    runs: list[list[str]] = []
    offset = 0
    for count in counts:
        runs.append(list(urls[offset : offset + count]))
        offset += count
    return runs
