"""Vectorised map, reduce and filter over the leading axis of an array.

These mirror :mod:`fun.core` for JAX arrays. The callback is traced by JAX
instead of being called once per item, so it has to be a pure function of
its array arguments.
"""

from __future__ import annotations

from typing import Any, Callable

import jax
import jax.numpy as jnp
import jax.typing
import numpy as np

from .utils.jax_setup import vmap

Array = jax.Array
ArrayLike = jax.typing.ArrayLike


def _leading_length(arr: Array) -> int:
    if arr.ndim == 0:
        raise ValueError("array operations need an input with at least one dimension")
    return int(arr.shape[0])


def _empty_like_rows(arr: Array) -> Array:
    return jnp.zeros((0,) + tuple(arr.shape[1:]), dtype=arr.dtype)


def array_map(fn: Callable[[Array], Any], data: ArrayLike) -> Any:
    """Apply ``fn`` to every row of ``data`` with :func:`jax.vmap`.

    The result has the same pytree structure as the output of ``fn``, with a
    leading axis of the input length added to every leaf.
    """

    arr = jnp.asarray(data)
    if _leading_length(arr) == 0:
        item = jax.ShapeDtypeStruct(tuple(arr.shape[1:]), arr.dtype)
        out = jax.eval_shape(fn, item)
        return jax.tree_util.tree_map(lambda s: jnp.zeros((0,) + tuple(s.shape), dtype=s.dtype), out)
    return vmap(fn)(arr)


def array_reduce(fn: Callable[[Array, Array], Any], data: ArrayLike, init: ArrayLike) -> Array:
    """Left fold of ``data`` with ``fn`` using :func:`jax.lax.scan`.

    The running value keeps the promoted dtype of ``init`` and ``data``; each
    step's result is cast back to it so the scan carry stays fixed.
    """

    arr = jnp.asarray(data)
    dtype = jnp.result_type(init, arr)
    carry = jnp.asarray(init, dtype=dtype)
    if _leading_length(arr) == 0:
        return carry

    def step(acc: Array, item: Array) -> tuple[Array, None]:
        return jnp.asarray(fn(acc, item), dtype=dtype), None

    result, _ = jax.lax.scan(step, carry, arr)
    return result


def array_filter(fn: Callable[[Array], Any], data: ArrayLike) -> Array:
    """Return the rows of ``data`` whose predicate holds, as a new exact-size array."""

    arr = jnp.asarray(data)
    n = _leading_length(arr)
    if n == 0:
        return _empty_like_rows(arr)

    mask = np.asarray(vmap(fn)(arr), dtype=bool)
    if mask.shape != (n,):
        raise ValueError(f"predicate must return one boolean per row, got shape {mask.shape}")
    (keep,) = np.nonzero(mask)
    return jnp.take(arr, jnp.asarray(keep, dtype=jnp.int32), axis=0)


__all__ = ["array_map", "array_reduce", "array_filter"]
