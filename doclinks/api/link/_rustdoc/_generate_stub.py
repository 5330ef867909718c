"""Build the Rust source file that drives rustdoc."""

from collections.abc import Iterable


def _generate_stub(destinations: Iterable[str], extern_crates: Iterable[str]) -> str:
    """Return a crate whose doc comment holds one intra-doc link per destination.

    Broken intra-doc links are denied so an unresolvable symbol fails the
    run. Redundant explicit links are allowed since some in-scope items are
    technically unnecessary to spell out (like ``[`Option`](std::option::Option)``),
    and we don't care about that.
    """
    lines = [
        "#![deny(rustdoc::broken_intra_doc_links)]",
        "#![allow(rustdoc::redundant_explicit_links)]",
    ]
    # A list makes the links easy to pull out of the generated HTML
    lines.extend(f"//! - LINK: [{dest}]" for dest in destinations)
    # Put some common things into scope so that links to them work
    lines.extend(f"extern crate {crate};" for crate in extern_crates)
    return "\n".join(lines) + "\n"
