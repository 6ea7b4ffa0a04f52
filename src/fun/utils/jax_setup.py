"""JAX helper utilities used by :mod:`fun.arrays`."""

from __future__ import annotations

from typing import Callable

import jax


def vmap(fn: Callable[..., jax.Array], *args, **kwargs) -> Callable[..., jax.Array]:
    """Thin wrapper over :func:`jax.vmap` to keep imports centralised."""

    return jax.vmap(fn, *args, **kwargs)


__all__ = ["vmap"]
