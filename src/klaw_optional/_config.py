"""Library configuration: OptionalConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_optional._logging import configure_logging

__all__ = [
    'OptionalConfig',
    'get_config',
    'init',
]

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class OptionalConfig:
    """Configuration for klaw-optional.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs when logging is configured, else console output.
        empty_marker: Text rendered by str() in place of the value of an empty Optional.
    """

    log_level: str | None = None
    json_logs: bool = True
    empty_marker: str = 'empty'


# Global configuration (set by init())
_config: OptionalConfig | None = None


def _detect_log_level() -> str | None:
    """Read KLAW_OPTIONAL_LOG_LEVEL, ignoring unknown level names."""
    env_level = os.environ.get('KLAW_OPTIONAL_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in logging.getLevelNamesMapping():
        logging.warning("Unknown KLAW_OPTIONAL_LOG_LEVEL value '%s', leaving logging unconfigured", env_level)
        return None
    return env_level


def _detect_json_logs() -> bool:
    """Read KLAW_OPTIONAL_JSON_LOGS, defaulting to True."""
    env_json = os.environ.get('KLAW_OPTIONAL_JSON_LOGS', '').lower()
    if env_json in _TRUE_VALUES:
        return True
    if env_json in _FALSE_VALUES:
        return False
    if env_json:
        logging.warning("Unknown KLAW_OPTIONAL_JSON_LOGS value '%s', defaulting to JSON output", env_json)
    return True


def _detect_empty_marker() -> str:
    return os.environ.get('KLAW_OPTIONAL_EMPTY_MARKER') or OptionalConfig.empty_marker


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    empty_marker: str | None = None,
) -> OptionalConfig:
    """Initialize klaw-optional with the given configuration.

    Explicit arguments win over KLAW_OPTIONAL_* environment variables, which
    win over the OptionalConfig defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = from environment, else silent.
        json_logs: JSON (True) or console (False) log output.
        empty_marker: Text shown by str() for empty Optionals.

    Returns:
        The OptionalConfig that was set.

    Example:
        ```python
        import klaw_optional

        klaw_optional.init(log_level='DEBUG', json_logs=False)
        str(klaw_optional.INT.of_empty())  # 'Optional<int>[empty]'
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()

    _config = OptionalConfig(
        log_level=resolved_level,
        json_logs=_detect_json_logs() if json_logs is None else json_logs,
        empty_marker=_detect_empty_marker() if empty_marker is None else empty_marker,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=_config.json_logs)

    return _config


def _from_environment() -> OptionalConfig:
    return OptionalConfig(
        log_level=_detect_log_level(),
        json_logs=_detect_json_logs(),
        empty_marker=_detect_empty_marker(),
    )


def get_config() -> OptionalConfig:
    """Get the current configuration.

    Before init() is called, the configuration is read once from the
    environment. Logging is left untouched on this path; only init()
    configures handlers.

    Returns:
        The current OptionalConfig.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        _config = _from_environment()
    return _config
