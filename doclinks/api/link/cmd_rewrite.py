"""Link rewrite API command."""

import logging
from collections.abc import Iterator
from pathlib import Path

from ..config.DocLinksConfig import DocLinksConfig
from ..StageResult import StageResult
from . import LinkRewriteOutput
from ._load_book import _load_book
from ._rustdoc import RustdocResolver
from .LinkRewriteError import LinkRewriteError
from .ResolverError import ResolverError
from .std_links import rewrite_documents

logger = logging.getLogger(__name__)


def cmd_rewrite(
    book_dir: str,
    out_dir: str | None = None,
    dry_run: bool = False,
    absolute: bool = False,
    config_path: str | None = None,
) -> StageResult:
    """Rewrite symbol links in every chapter to documentation URLs.

    Args:
        book_dir: Book source directory (holding SUMMARY.md or markdown chapters)
        out_dir: Write every chapter here instead of rewriting changed chapters in place
        dry_run: Resolve and plan, but write nothing
        absolute: Keep absolute URLs even when the config asks for relative ones
        config_path: Config file to load instead of $DOCLINKS_HOME/config.json
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        src_dir = Path(book_dir).expanduser()
        target_dir = Path(out_dir).expanduser() if out_dir else src_dir

        def fail(message: str, errors: list[str]) -> None:
            result_obj.output = LinkRewriteOutput(
                errors=errors,
                warnings=[],
                book_dir=str(src_dir),
                out_dir=str(target_dir),
                documents=0,
                links=0,
                changed=[],
                dry_run=dry_run,
            ).model_dump(mode="python")
            result_obj.result = message
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = DocLinksConfig.load(Path(config_path).expanduser() if config_path else None)
        except ValueError as e:
            fail(f"Error loading configuration: {e}", [str(e)])
            return
        relative = config.relative and not absolute

        yield (0.2, "Loading chapters...")
        try:
            documents = _load_book(src_dir)

            yield (0.4, f"Resolving and rewriting links in {len(documents)} chapters...")
            changed, link_count = rewrite_documents(documents, RustdocResolver(config.resolver), relative)
        except ResolverError as e:
            logger.error(f"{e}\n{e.stderr}")
            errors = [str(e), e.stderr] if e.stderr else [str(e)]
            fail(f"Error resolving links: {e}\n{e.stderr}".rstrip(), errors)
            return
        except (LinkRewriteError, ValueError, OSError) as e:
            logger.error(f"Link rewrite failed for {src_dir}: {e}")
            fail(f"Error rewriting links: {e}", [str(e)])
            return

        if not dry_run:
            yield (0.9, f"Writing chapters to {target_dir}...")
            try:
                for document in documents:
                    if out_dir is None and document.path not in changed:
                        continue
                    target = target_dir / document.path
                    target.parent.mkdir(parents=True, exist_ok=True)
                    target.write_text(document.content, encoding="utf-8")
            except OSError as e:
                logger.error(f"Failed to write chapters to {target_dir}: {e}")
                fail(f"Error writing chapters: {e}", [str(e)])
                return

        yield (1.0, "Complete")
        result_obj.output = LinkRewriteOutput(
            errors=[],
            warnings=[],
            book_dir=str(src_dir),
            out_dir=str(target_dir),
            documents=len(documents),
            links=link_count,
            changed=changed,
            dry_run=dry_run,
        ).model_dump(mode="python")
        verb = "Would rewrite" if dry_run else "Rewrote"
        result_obj.result = f"{verb} {link_count} links in {len(changed)} of {len(documents)} chapters"
        result_obj.success = True

    return StageResult(announce=f"Rewriting links in {book_dir}...", progress_callback=do_work)
