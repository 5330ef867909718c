"""Invoke rustdoc on the stub crate."""

import logging
import subprocess
from pathlib import Path

from ...config.ResolverConfig import ResolverConfig
from ..ResolverError import ResolverError

logger = logging.getLogger(__name__)


def _run_rustdoc(tmp_dir: Path, src_path: Path, config: ResolverConfig) -> Path:
    """Run rustdoc in ``tmp_dir`` and return the path of the generated index.html.

    Raises:
        ResolverError: If rustdoc is missing, fails, or generates no index
    """
    cmd = [config.binary, f"--edition={config.edition}", str(src_path)]
    logger.info(f"Running {' '.join(cmd)} in {tmp_dir}")
    try:
        result = subprocess.run(
            cmd,
            cwd=tmp_dir,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ResolverError(f"failed to run {config.binary!r}: rustdoc not installed? ({exc})") from exc

    if result.returncode != 0:
        raise ResolverError(
            f"failed to extract std links (exit status {result.returncode})",
            stderr=result.stderr,
            returncode=result.returncode,
        )

    generated = tmp_dir / config.output_path
    if not generated.is_file():
        raise ResolverError(f"rustdoc succeeded but did not generate {config.output_path}", stderr=result.stderr)
    return generated
