"""ContextVar-based format configuration for pipefmt.

Config is read once per format call. Each thread and asyncio task sees its own
value, so no locks are needed.

Usage:
    from pipefmt.config import FormatConfig, format_config_context

    with format_config_context(FormatConfig(strict=True)):
        result = format_with_diagnostics(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable format configuration.

    Attributes:
        strict: Report broken tables as diagnostics
        newline: Line ending for rendered tables; None keeps the ending of
            each table's header line

    """

    strict: bool = False
    newline: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "FormatConfig":
        """Create FormatConfig from dictionary.

        Only includes keys that are valid FormatConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> FormatConfig.from_dict({"strict": True, "width": 80}).strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: FormatConfig = FormatConfig()

_format_config: ContextVar[FormatConfig] = ContextVar(
    "format_config",
    default=_DEFAULT_CONFIG,
)


def get_format_config() -> FormatConfig:
    """Get the format configuration active in this context."""
    return _format_config.get()


def set_format_config(config: FormatConfig) -> None:
    """Set format configuration for the current context."""
    _format_config.set(config)


def reset_format_config() -> None:
    """Reset to the default configuration."""
    _format_config.set(_DEFAULT_CONFIG)


@contextmanager
def format_config_context(config: FormatConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with format_config_context(FormatConfig(strict=True)):
        ...     get_format_config().strict
        True

    Restores the previous config even if an exception is raised.

    """
    previous = _format_config.get()
    _format_config.set(config)
    try:
        yield
    finally:
        _format_config.set(previous)


__all__ = [
    "FormatConfig",
    "get_format_config",
    "set_format_config",
    "reset_format_config",
    "format_config_context",
]
