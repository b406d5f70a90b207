"""Core module exports."""

from schemaplane.core.errors import (
    ConfigError,
    ErrorCode,
    SchemaPlaneError,
    SourceError,
)
from schemaplane.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from schemaplane.core.progress import spinner, status, task

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "SchemaPlaneError",
    "SourceError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "spinner",
    "status",
    "task",
]
