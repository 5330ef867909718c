"""doclinks - rewrite library symbol links in book chapters to versioned documentation URLs."""

__version__ = "0.1.0"
