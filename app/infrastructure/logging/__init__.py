"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the extraction tooling using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_scan_context(): Context manager for per-file log context

Formatters:
    - add_app_info(): Processor to add app name/version
    - truncate_large_values(): Processor to limit string lengths

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")
"""

# Core logging setup
from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

# Scan context
from infrastructure.logging.context import (
    bind_scan_context,
    get_scan_id,
)

# Log formatters/processors
from infrastructure.logging.formatters import (
    add_app_info,
    truncate_large_values,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_scan_context",
    "get_scan_id",
    # Formatters
    "add_app_info",
    "truncate_large_values",
]
