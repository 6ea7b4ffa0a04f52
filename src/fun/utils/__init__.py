"""Utility helpers for the :mod:`fun` package."""

from .logging import setup_logging

__all__ = ["setup_logging"]
