"""Building blocks for GPU memory management: math, flags, lists, refcounts, logging."""

__version__ = "0.1.0"