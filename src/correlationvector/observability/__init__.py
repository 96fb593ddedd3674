"""Observability module for propagating correlation vectors."""

from .correlation import (
    get_correlation_vector,
    reset_correlation_vector,
    set_correlation_vector,
)

__all__ = [
    "get_correlation_vector",
    "reset_correlation_vector",
    "set_correlation_vector",
]
