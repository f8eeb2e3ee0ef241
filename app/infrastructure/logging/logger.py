"""Structured logger for observability."""

import logging
from typing import Any, Optional

# Configure root logger with JSON-like structured format
_logger = logging.getLogger("vehicle_inventory")
_logger.setLevel(logging.INFO)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def configure_logging(level: str) -> None:
    """
    Set the level of the application logger.

    Args:
        level: Level name (e.g., 'INFO', 'DEBUG')
    """
    _logger.setLevel(level.upper())


def log_event(
    component: str,
    event: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'http', 'service', 'repository')
        event: Event name (e.g., 'vehicle_created')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "component": component,
        "event": event,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_request(
    request_id: str,
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    **kwargs: Any,
) -> None:
    """
    Log a completed HTTP request.

    Args:
        request_id: Request correlation identifier
        method: HTTP method
        path: Request path
        status_code: Response status code
        duration_ms: Handling time in milliseconds
        **kwargs: Additional fields
    """
    level = logging.ERROR if status_code >= 500 else logging.INFO
    log_event(
        component="http",
        event="request",
        level=level,
        request_id=request_id,
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=round(duration_ms, 2),
        **kwargs,
    )


def log_vehicle_change(
    event: str,
    vehicle_id: Optional[str],
    **kwargs: Any,
) -> None:
    """
    Log a successful vehicle write.

    Args:
        event: 'vehicle_created', 'vehicle_updated' or 'vehicle_deleted'
        vehicle_id: Vehicle identifier
        **kwargs: Additional fields
    """
    log_event(component="service", event=event, vehicle_id=vehicle_id, **kwargs)


def log_rejection(
    event: str,
    field: str,
    reason: str,
    **kwargs: Any,
) -> None:
    """
    Log a client-fixable rejection (validation failure or duplicate).

    Args:
        event: Rejection kind (e.g., 'validation_failed', 'duplicate_field')
        field: Offending field
        reason: Human-readable reason
        **kwargs: Additional fields
    """
    log_event(
        component="service",
        event=event,
        level=logging.WARNING,
        field=field,
        reason=reason,
        **kwargs,
    )


# Export logger instance for backward compatibility
logger = _logger
