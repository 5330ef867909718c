"""Unit tests for doclinks.api.link._rustdoc._extract_urls."""

import pytest

from doclinks.api.link._rustdoc._extract_urls import _extract_urls
from doclinks.api.link.OutputMismatchError import OutputMismatchError

VEC_URL = "https://doc.rust-lang.org/nightly/alloc/vec/struct.Vec.html"
OPTION_URL = "https://doc.rust-lang.org/nightly/core/option/enum.Option.html"


def _item(url, text):
    return f'<li>LINK: <a href="{url}" title="struct {text}"><code>{text}</code></a></li>'


def _html(*items):
    return "<html><body><ul>\n" + "\n".join(items) + "\n</ul></body></html>\n"


def test_urls_in_list_order():
    html = _html(_item(VEC_URL, "Vec"), _item(OPTION_URL, "Option"))
    assert _extract_urls(html, ["std::vec::Vec", "std::option::Option"]) == [VEC_URL, OPTION_URL]


def test_url_fragment_is_kept():
    url = "https://doc.rust-lang.org/nightly/core/option/enum.Option.html#method.map"
    assert _extract_urls(_html(_item(url, "map")), ["Option::map"]) == [url]


def test_count_mismatch():
    html = _html(_item(VEC_URL, "Vec"))
    with pytest.raises(OutputMismatchError, match="expected rustdoc to generate 2 links, but found 1"):
        _extract_urls(html, ["std::vec::Vec", "std::option::Option"])


def test_missing_anchor():
    html = _html("<li>LINK: [std::vec::Vec]</li>")
    with pytest.raises(OutputMismatchError) as exc_info:
        _extract_urls(html, ["std::vec::Vec"])
    assert "could not find anchor" in str(exc_info.value)
    assert "link=std::vec::Vec" in str(exc_info.value)


def test_no_links():
    assert _extract_urls(_html(), []) == []
