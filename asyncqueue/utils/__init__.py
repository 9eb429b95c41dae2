"""Utility functions for asyncqueue."""

from .config import DEFAULT_ENV_PREFIX, load_queue_config

__all__ = [
    "DEFAULT_ENV_PREFIX",
    "load_queue_config",
]
