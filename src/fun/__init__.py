"""fun
===

Generic ``map``, ``reduce`` and ``filter`` over sequences. The vectorised
JAX counterparts live in :mod:`fun.arrays`, which is imported on its own so
the sequence operations work without JAX installed.
"""

from .core import filter, map, reduce
from .utils.logging import setup_logging

__all__ = ["map", "reduce", "filter", "setup_logging"]
