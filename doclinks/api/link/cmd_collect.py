"""Link collect API command."""

import logging
from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import LinkCollectOutput
from ._collect_markdown_links import _collect_markdown_links
from ._load_book import _load_book
from .LinkRewriteError import LinkRewriteError

logger = logging.getLogger(__name__)


def cmd_collect(book_dir: str) -> StageResult:
    """List the candidate symbol links of every chapter without resolving them."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading chapters...")
        src_dir = Path(book_dir).expanduser()
        try:
            documents = _load_book(src_dir)

            yield (0.5, f"Scanning {len(documents)} chapters for links...")
            chapters = []
            total = 0
            for document in documents:
                links = _collect_markdown_links(document)
                total += len(links)
                chapters.append(
                    {
                        "path": document.path,
                        "links": [
                            {
                                "link_type": link.link_type.value,
                                "dest_url": link.dest_url,
                                "start": link.start,
                                "end": link.end,
                                "broken": link.broken,
                            }
                            for link in links
                        ],
                    }
                )
        except (LinkRewriteError, ValueError, OSError) as e:
            logger.error(f"Link collection failed for {src_dir}: {e}")
            result_obj.output = LinkCollectOutput(
                errors=[str(e)],
                warnings=[],
                book_dir=str(src_dir),
                documents=[],
                total=0,
            ).model_dump(mode="python")
            result_obj.result = f"Error collecting links: {e}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = LinkCollectOutput(
            errors=[],
            warnings=[],
            book_dir=str(src_dir),
            documents=chapters,
            total=total,
        ).model_dump(mode="python")
        result_obj.result = f"Found {total} links in {len(documents)} chapters"
        result_obj.success = True

    return StageResult(announce=f"Collecting links in {book_dir}...", progress_callback=do_work)
