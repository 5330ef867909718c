"""Shared pytest configuration and fixtures for all tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from doclinks.api.link.Resolver import Resolver

# Seconds before pytest-timeout fails a test, by test location
UNIT_TIMEOUT = 30
INTEGRATION_TIMEOUT = 120


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external tools")
    config.addinivalue_line("markers", "integration: tests that exercise the CLI end to end")
    config.addinivalue_line("markers", "link: link collection, resolution and rewriting")
    config.addinivalue_line("markers", "config: configuration loading")
    config.addinivalue_line("markers", "cli: command line interface")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers and timeouts based on test file location."""
    for item in items:
        path_str = str(item.path)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
            timeout = UNIT_TIMEOUT
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)
            timeout = INTEGRATION_TIMEOUT
        else:
            continue
        if item.get_closest_marker("timeout") is None:
            item.add_marker(pytest.mark.timeout(timeout))


# =============================================================================
# Resolver Helpers
# =============================================================================


def doc_url_for(dest: str) -> str:
    """Build a nightly doc.rust-lang.org URL for a symbol path like std::vec::Vec."""
    parts = dest.strip("`").split("::")
    return f"https://doc.rust-lang.org/nightly/{'/'.join(parts[:-1])}/struct.{parts[-1]}.html"


class FakeResolver(Resolver):
    """Resolver that answers from fixed URLs or a mapping function.

    Records every call so tests can check what was submitted.
    """

    def __init__(self, urls: list[str] | None = None, mapping: Callable[[str], str] = doc_url_for):
        self.urls = urls
        self.mapping = mapping
        self.calls: list[list[str]] = []

    def resolve(self, destinations: list[str]) -> list[str]:
        self.calls.append(list(destinations))
        if self.urls is not None:
            return list(self.urls)
        return [self.mapping(dest) for dest in destinations]


@pytest.fixture
def fake_resolver() -> type[FakeResolver]:
    """The FakeResolver class, for tests that build their own."""
    return FakeResolver


@pytest.fixture
def url_for() -> Callable[[str], str]:
    return doc_url_for


# =============================================================================
# Command Helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    return _run_cmd


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the user's config and resolver overrides out of the tests."""
    monkeypatch.setenv("DOCLINKS_HOME", str(tmp_path / "doclinks-home"))
    monkeypatch.delenv("RUSTDOC", raising=False)
    monkeypatch.delenv("SPEC_RELATIVE", raising=False)
    # Handlers bound to a captured stream would outlive the test
    monkeypatch.setattr("doclinks.utils.logger._CONFIGURED", True)


@pytest.fixture
def book_dir(tmp_path) -> Path:
    """A small book: two chapters in SUMMARY.md order plus a draft."""
    src = tmp_path / "src"
    (src / "types").mkdir(parents=True)
    (src / "SUMMARY.md").write_text(
        "# Summary\n\n"
        "- [Introduction](introduction.md)\n"
        "- [Types](types/index.md)\n"
        "    - [Draft]()\n",
        encoding="utf-8",
    )
    (src / "introduction.md").write_text(
        "# Introduction\n\nSee [std::option::Option] for details.\n",
        encoding="utf-8",
    )
    (src / "types" / "index.md").write_text(
        "# Types\n\nA [`Vec`][vec] grows, see [the intro](../introduction.md).\n\n[vec]: std::vec::Vec\n",
        encoding="utf-8",
    )
    return src
