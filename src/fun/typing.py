"""Shared typing aliases for the :mod:`fun` package."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")
IN = TypeVar("IN")
OUT = TypeVar("OUT")
A = TypeVar("A")
I = TypeVar("I")  # noqa: E741

Transform = Callable[[IN], OUT]
Accumulator = Callable[[A, I], A]
Predicate = Callable[[T], bool]

__all__ = ["T", "IN", "OUT", "A", "I", "Transform", "Accumulator", "Predicate"]
