"""Environment-driven queue configuration."""

import logging
import os

from dotenv import load_dotenv

from ..types.types import QueueConfig

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "ASYNCQUEUE_"


def _env_int(name: str, default: int, minimum: int) -> int:
    env_value = os.getenv(name)
    if not env_value:
        return default
    try:
        value = int(env_value)
    except ValueError:
        logger.warning("Invalid %s value '%s', using default %s", name, env_value, default)
        return default
    if value < minimum:
        logger.warning("%s must be >= %s, got %s, using default %s", name, minimum, value, default)
        return default
    return value


def _env_float(name: str, default: float) -> float:
    env_value = os.getenv(name)
    if not env_value:
        return default
    try:
        value = float(env_value)
    except ValueError:
        logger.warning("Invalid %s value '%s', using default %s", name, env_value, default)
        return default
    if value < 0:
        logger.warning("%s must be >= 0, got %s, using default %s", name, value, default)
        return default
    return value


def _env_bool(name: str, default: bool) -> bool:
    env_value = os.getenv(name)
    if not env_value:
        return default
    return env_value.strip().lower() in ("1", "true", "yes", "on")


def load_queue_config(
    concurrency: int | None = None,
    busy_delay: float | None = None,
    paused: bool | None = None,
    prefix: str = DEFAULT_ENV_PREFIX,
) -> QueueConfig:
    """Build a QueueConfig from explicit values, falling back to the environment.

    Reads ``<prefix>CONCURRENCY``, ``<prefix>BUSY_DELAY`` (seconds) and
    ``<prefix>PAUSED`` after loading a ``.env`` file if one is present.
    Invalid environment values are logged and replaced by the defaults;
    invalid explicit values raise.

    Args:
        concurrency: Maximum concurrent executions
        busy_delay: Backoff in seconds when saturated
        paused: Whether the queue starts paused
        prefix: Environment variable prefix

    Returns:
        QueueConfig

    Raises:
        ValueError: If an explicit value is out of range
    """
    load_dotenv()
    defaults = QueueConfig()

    if concurrency is None:
        concurrency = _env_int(f"{prefix}CONCURRENCY", defaults.concurrency, minimum=1)
    if busy_delay is None:
        busy_delay = _env_float(f"{prefix}BUSY_DELAY", defaults.busy_delay)
    if paused is None:
        paused = _env_bool(f"{prefix}PAUSED", defaults.paused)

    return QueueConfig(concurrency=concurrency, busy_delay=busy_delay, paused=paused)
