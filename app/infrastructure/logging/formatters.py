"""Custom log processors for structured logging.

Usage:
    from infrastructure.logging.formatters import add_app_info

Dependencies:
    - structlog processors
"""

from typing import Any


def add_app_info(app_name: str, app_version: str | None = None):
    """Create a processor that adds application info to log entries.

    Args:
        app_name: Name of the application.
        app_version: Version string. Defaults to the installed distribution
            version.

    Returns:
        A structlog processor function.
    """
    if app_version is None:
        from infrastructure.version import VERSION

        app_version = VERSION

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


def truncate_large_values(max_length: int = 500):
    """Create a processor that truncates overly large string values.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
