"""Pull the resolved URLs out of rustdoc's HTML."""

from ..LinkPatterns import LINK_PATTERNS, LinkPatterns
from ..OutputMismatchError import OutputMismatchError


def _extract_urls(html: str, destinations: list[str], patterns: LinkPatterns = LINK_PATTERNS) -> list[str]:
    """Return the href of every ``LINK:`` list item, in order.

    Raises:
        OutputMismatchError: If the number of items differs from the number
            of destinations, or an item holds no anchor
    """
    items = [
        match.group(1)
        for line in html.splitlines()
        for match in patterns.std_link_extract.finditer(line)
    ]
    if len(items) != len(destinations):
        raise OutputMismatchError(
            f"expected rustdoc to generate {len(destinations)} links, but found {len(items)}"
        )

    urls = []
    for item, dest in zip(items, destinations):
        match = patterns.anchor_url.search(item)
        if match is None:
            raise OutputMismatchError(f"could not find anchor in:\n{item}\nlink={dest}")
        urls.append(match.group(1))
    return urls
