"""Resolver backed by rustdoc intra-doc links."""

import logging
import tempfile
from pathlib import Path

from ...config.ResolverConfig import ResolverConfig
from ..Resolver import Resolver
from ._extract_urls import _extract_urls
from ._generate_stub import _generate_stub
from ._run_rustdoc import _run_rustdoc

logger = logging.getLogger(__name__)


class RustdocResolver(Resolver):
    """Resolve symbol paths by letting rustdoc generate intra-doc links.

    Each call writes a stub crate into a fresh temporary directory, runs
    rustdoc on it and reads the links back out of the generated HTML. The
    directory is removed when the call returns, whether or not it succeeded.
    """

    def __init__(self, config: ResolverConfig | None = None):
        self.config = config if config is not None else ResolverConfig()

    def resolve(self, destinations: list[str]) -> list[str]:
        with tempfile.TemporaryDirectory(prefix="doclinks-") as temp_dir:
            tmp = Path(temp_dir)
            src_path = tmp / f"{self.config.crate_name}.rs"
            src_path.write_text(_generate_stub(destinations, self.config.extern_crates), encoding="utf-8")
            logger.debug(f"Wrote stub with {len(destinations)} links to {src_path}")

            generated = _run_rustdoc(tmp, src_path, self.config)
            html = generated.read_text(encoding="utf-8")
            return _extract_urls(html, destinations)
