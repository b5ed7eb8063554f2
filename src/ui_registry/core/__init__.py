"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .logging_config import configure_logging, get_logger, LogContext
from .errors import ErrorKind, RegistryError, report_error
from .json import parse_json, safe_json_dumps, JSONParseError
from .merge import (
    merge_records,
    merge_all_records,
    merge_keyed,
    merge_dependencies,
    package_name,
    union_append,
)


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


async def close_container(container) -> None:
    """Close resources held by a container."""
    from .container import close_container as _close_container

    await _close_container(container)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # Errors
    "ErrorKind",
    "RegistryError",
    "report_error",
    # JSON
    "parse_json",
    "safe_json_dumps",
    "JSONParseError",
    # Merging
    "merge_records",
    "merge_all_records",
    "merge_keyed",
    "merge_dependencies",
    "package_name",
    "union_append",
    # DI
    "create_container",
    "close_container",
]
