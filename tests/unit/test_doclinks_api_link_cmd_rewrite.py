"""Unit tests for doclinks.api.link.cmd_rewrite."""

import json

import pytest

from doclinks.api.link.cmd_rewrite import cmd_rewrite
from doclinks.api.link.ResolverError import ResolverError

pytestmark = pytest.mark.link

INTRO = "# Introduction\n\nSee [std::option::Option] for details.\n"


@pytest.fixture
def resolver(monkeypatch, fake_resolver):
    """Replace rustdoc with a FakeResolver and remember the config it was built with."""
    fake = fake_resolver()
    configs = []

    def build(config):
        configs.append(config)
        return fake

    monkeypatch.setattr("doclinks.api.link.cmd_rewrite.RustdocResolver", build)
    fake.configs = configs
    return fake


def test_rewrite_in_place(book_dir, run_cmd, resolver):
    result = run_cmd(cmd_rewrite, str(book_dir))

    assert result.success is True, result.output
    assert result.result == "Rewrote 2 links in 2 of 2 chapters"
    assert result.output["links"] == 2
    assert result.output["documents"] == 2
    assert result.output["changed"] == ["introduction.md", "types/index.md"]
    assert result.output["dry_run"] is False
    assert (book_dir / "introduction.md").read_text(encoding="utf-8") == (
        "# Introduction\n\nSee [std::option::Option](../std/option/struct.Option.html) for details.\n"
    )
    assert (book_dir / "types" / "index.md").read_text(encoding="utf-8") == (
        "# Types\n\nA [`Vec`](../../std/vec/struct.Vec.html) grows, see [the intro](../introduction.md).\n\n"
        "[vec]: std::vec::Vec\n"
    )
    assert resolver.calls == [["std::option::Option", "std::vec::Vec"]]


def test_dry_run_writes_nothing(book_dir, run_cmd, resolver):
    result = run_cmd(cmd_rewrite, str(book_dir), dry_run=True)

    assert result.success is True
    assert result.result == "Would rewrite 2 links in 2 of 2 chapters"
    assert result.output["dry_run"] is True
    assert (book_dir / "introduction.md").read_text(encoding="utf-8") == INTRO


def test_out_dir_gets_every_chapter(book_dir, tmp_path, run_cmd, resolver):
    (book_dir / "SUMMARY.md").write_text(
        "- [Introduction](introduction.md)\n- [Plain](plain.md)\n", encoding="utf-8"
    )
    (book_dir / "plain.md").write_text("No symbols.\n", encoding="utf-8")
    out_dir = tmp_path / "out"

    result = run_cmd(cmd_rewrite, str(book_dir), out_dir=str(out_dir))

    assert result.success is True
    assert result.output["changed"] == ["introduction.md"]
    assert (out_dir / "plain.md").read_text(encoding="utf-8") == "No symbols.\n"
    assert "(../std/option/struct.Option.html)" in (out_dir / "introduction.md").read_text(encoding="utf-8")
    assert (book_dir / "introduction.md").read_text(encoding="utf-8") == INTRO


def test_absolute_urls(book_dir, run_cmd, resolver, url_for):
    result = run_cmd(cmd_rewrite, str(book_dir), absolute=True)

    assert result.success is True
    content = (book_dir / "introduction.md").read_text(encoding="utf-8")
    assert f"[std::option::Option]({url_for('std::option::Option')})" in content


def test_config_file_is_used(book_dir, tmp_path, run_cmd, resolver, monkeypatch):
    monkeypatch.setenv("RUSTDOC", "/opt/rustdoc")
    config_path = tmp_path / "custom.json"
    config_path.write_text(json.dumps({"relative": False, "resolver": {"edition": "2024"}}), encoding="utf-8")

    result = run_cmd(cmd_rewrite, str(book_dir), dry_run=True, config_path=str(config_path))

    assert result.success is True
    (config,) = resolver.configs
    assert config.edition == "2024"
    assert config.binary == "/opt/rustdoc"


def test_invalid_config(book_dir, tmp_path, run_cmd, resolver):
    config_path = tmp_path / "bad.json"
    config_path.write_text("{oops", encoding="utf-8")

    result = run_cmd(cmd_rewrite, str(book_dir), config_path=str(config_path))

    assert result.success is False
    assert result.result.startswith("Error loading configuration")
    assert resolver.calls == []


def test_title_leaves_every_chapter_unchanged(book_dir, run_cmd, resolver):
    types_before = (book_dir / "types" / "index.md").read_text(encoding="utf-8")
    (book_dir / "introduction.md").write_text('[Option](std::option::Option "t")\n', encoding="utf-8")

    result = run_cmd(cmd_rewrite, str(book_dir))

    assert result.success is False
    assert result.output["changed"] == []
    assert "titles in links are not supported" in result.output["errors"][0]
    assert (book_dir / "types" / "index.md").read_text(encoding="utf-8") == types_before


def test_resolver_error_reports_stderr(book_dir, run_cmd, monkeypatch):
    class FailingResolver:
        def __init__(self, config):
            pass

        def resolve(self, destinations):
            raise ResolverError("failed to extract std links (exit status 1)", stderr="error: unresolved link", returncode=1)

    monkeypatch.setattr("doclinks.api.link.cmd_rewrite.RustdocResolver", FailingResolver)

    result = run_cmd(cmd_rewrite, str(book_dir))

    assert result.success is False
    assert result.output["errors"] == ["failed to extract std links (exit status 1)", "error: unresolved link"]
    assert "error: unresolved link" in result.result
    assert (book_dir / "introduction.md").read_text(encoding="utf-8") == INTRO


def test_resolver_count_mismatch(book_dir, run_cmd, monkeypatch, fake_resolver):
    monkeypatch.setattr(
        "doclinks.api.link.cmd_rewrite.RustdocResolver", lambda config: fake_resolver(urls=[])
    )

    result = run_cmd(cmd_rewrite, str(book_dir))

    assert result.success is False
    assert "expected rustdoc to generate 2 links, but found 0" in result.output["errors"][0]
    assert (book_dir / "introduction.md").read_text(encoding="utf-8") == INTRO
