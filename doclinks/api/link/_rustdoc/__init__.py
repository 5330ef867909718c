"""rustdoc-backed resolver."""

from .RustdocResolver import RustdocResolver

__all__ = ["RustdocResolver"]
