"""Top-level doclinks configuration."""

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .get_config_path import get_config_path
from .LogConfig import LogConfig
from .ResolverConfig import ResolverConfig

# Environment variable overriding the resolver binary
RESOLVER_ENV = "RUSTDOC"
# Environment variable that switches to absolute URLs when set to "0"
RELATIVE_ENV = "SPEC_RELATIVE"


class DocLinksConfig(BaseModel):
    """Top-level configuration for doclinks."""

    model_config = ConfigDict(extra="forbid")

    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    relative: bool = Field(True, description="Emit URLs relative to the chapter instead of absolute")
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        return get_config_path()

    @classmethod
    def load(cls, path: Path | None = None, environ: Mapping[str, str] | None = None) -> "DocLinksConfig":
        """Load and validate config, then apply environment overrides.

        A missing config file is not an error; defaults are used.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = path if path is not None else cls.get_config_path()

        raw: dict[str, Any] = {}
        if path.exists():
            try:
                with path.open() as fh:
                    raw = json.load(fh)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            config = cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

        return config.with_environment(os.environ if environ is None else environ)

    def with_environment(self, environ: Mapping[str, str]) -> "DocLinksConfig":
        """Return a copy with RUSTDOC and SPEC_RELATIVE applied."""
        update: dict[str, Any] = {}
        binary = environ.get(RESOLVER_ENV)
        if binary:
            update["resolver"] = self.resolver.model_copy(update={"binary": binary})
        # Set SPEC_RELATIVE=0 to disable relative links, useful for local previews
        if environ.get(RELATIVE_ENV) == "0":
            update["relative"] = False
        return self.model_copy(update=update) if update else self
