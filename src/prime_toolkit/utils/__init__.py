"""Utility modules for prime_toolkit."""

from prime_toolkit.utils.logging import setup_logger

__all__ = [
    "setup_logger",
]
