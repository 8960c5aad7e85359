"""
Utilities package for the record semantics demo.

Exports shared helpers for cross-cutting concerns. Keep this package free of
domain-specific logic.
"""

from recorddemo.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
