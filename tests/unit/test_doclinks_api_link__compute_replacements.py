"""Unit tests for doclinks.api.link._compute_replacements."""

import pytest

from doclinks.api.link._compute_replacements import _compute_replacements
from doclinks.api.link.InternalLinkError import InternalLinkError
from doclinks.api.link.Link import Link
from doclinks.api.link.LinkType import LinkType
from doclinks.api.link.OutputMismatchError import OutputMismatchError

pytestmark = pytest.mark.link

VEC_URL = "https://doc.rust-lang.org/nightly/alloc/vec/struct.Vec.html"


def _link(content, text, link_type, dest="std::vec::Vec"):
    start = content.index(text)
    return Link(link_type, dest, start, start + len(text))


@pytest.mark.parametrize(
    ("text", "link_type", "md_link"),
    [
        ("[`Vec`](std::vec::Vec)", LinkType.INLINE, "[`Vec`]"),
        ("[`Vec`][vec]", LinkType.REFERENCE, "[`Vec`]"),
        ("[Vec][]", LinkType.COLLAPSED, "[Vec]"),
        ("[std::vec::Vec]", LinkType.SHORTCUT, "[std::vec::Vec]"),
    ],
)
def test_display_text_is_kept(text, link_type, md_link):
    content = f"A {text} grows."
    (replacement,) = _compute_replacements(content, [_link(content, text, link_type)], [VEC_URL], depth=1)
    assert replacement.md_link == md_link
    assert replacement.url == "../alloc/vec/struct.Vec.html"
    assert content[replacement.start : replacement.end] == text


def test_absolute_urls():
    content = "A [std::vec::Vec] grows."
    links = [_link(content, "[std::vec::Vec]", LinkType.SHORTCUT)]
    (replacement,) = _compute_replacements(content, links, [VEC_URL], depth=1, relative=False)
    assert replacement.url == VEC_URL


def test_sorted_descending_by_start():
    content = "[a] [b] [c]"
    links = [_link(content, f"[{name}]", LinkType.SHORTCUT, f"std::{name}") for name in "abc"]
    urls = [f"https://doc.rust-lang.org/stable/std/{name}/index.html" for name in "abc"]
    replacements = _compute_replacements(content, links, urls, depth=2)
    assert [r.start for r in replacements] == [8, 4, 0]
    assert [r.url for r in replacements] == [
        "../../std/c/index.html",
        "../../std/b/index.html",
        "../../std/a/index.html",
    ]


def test_shape_mismatch():
    content = "just [foo] here"
    links = [_link(content, "[foo]", LinkType.INLINE)]
    with pytest.raises(OutputMismatchError, match="of type inline to match regex"):
        _compute_replacements(content, links, [VEC_URL], depth=1)


@pytest.mark.parametrize("link_type", [LinkType.AUTOLINK, LinkType.EMAIL])
def test_unexpected_link_type(link_type):
    content = "<https://example.com>"
    links = [Link(link_type, "https://example.com", 0, len(content))]
    with pytest.raises(InternalLinkError):
        _compute_replacements(content, links, [VEC_URL], depth=1)


def test_non_canonical_url():
    content = "[std::vec::Vec]"
    links = [_link(content, content, LinkType.SHORTCUT)]
    with pytest.raises(OutputMismatchError):
        _compute_replacements(content, links, ["https://docs.rs/x"], depth=1)
