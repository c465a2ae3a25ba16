"""Library configuration: Config and initialization."""

from __future__ import annotations

from dataclasses import dataclass

from adtkit._logging import configure_logging

__all__ = [
    "Config",
    "get_config",
    "init",
    "reset",
]


@dataclass(frozen=True)
class Config:
    """Configuration for adtkit.

    Only observability lives here. What the conversions catch is chosen per
    call through their ``exceptions`` argument.

    Attributes:
        log_level: Logging level (e.g., "DEBUG"). None = silent.
        json_output: Render logs as JSON (True) or console text (False).
    """

    log_level: str | None = None
    json_output: bool = True


_DEFAULT = Config()
_config: Config = _DEFAULT


def init(
    log_level: str | None = None,
    *,
    json_output: bool = True,
) -> Config:
    """Install a library-wide configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: Render logs as JSON.

    Returns:
        The Config that was set.

    Example:
        ```python
        import adtkit

        adtkit.init(log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    _config = Config(log_level=log_level, json_output=json_output)

    if log_level is not None:
        configure_logging(log_level, json_output=json_output)

    return _config


def get_config() -> Config:
    """Get the current configuration (defaults until ``init`` is called)."""
    return _config


def reset() -> None:
    """Restore the default configuration."""
    global _config  # noqa: PLW0603
    _config = _DEFAULT
