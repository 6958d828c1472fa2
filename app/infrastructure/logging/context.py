"""Scan context binding for structured logging.

Binds per-scan metadata (the scanned file, a scan identifier) so every log
entry emitted while a file is processed can be correlated with it.

Usage:
    from infrastructure.logging import bind_scan_context

    with bind_scan_context(file="src/app.js"):
        # All logs within this block include file and scan_id
        logger.warning("translate_call_invalid", line=12)

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_scan_context(
    file: Optional[str] = None,
    scan_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind scan-scoped context to all logs within the context manager.

    Args:
        file: Path of the file being processed.
        scan_id: Identifier shared by all files of one scan. Reuses the
            enclosing scan's id if one is bound, else one is generated.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.

    Example:
        with bind_scan_context(scan_id="nightly"):
            for path in files:
                with bind_scan_context(file=str(path)):
                    extract(path)
    """
    context: dict[str, Any] = {
        "scan_id": scan_id or get_scan_id() or str(uuid.uuid4()),
    }
    if file is not None:
        context["file"] = file
    context.update(extra_context)

    # Nested blocks must get the outer values back on exit
    previous = structlog.contextvars.get_contextvars()
    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
        restored = {key: previous[key] for key in context if key in previous}
        if restored:
            structlog.contextvars.bind_contextvars(**restored)


def get_scan_id() -> Optional[str]:
    """Get the current scan ID from the logging context.

    Returns:
        The scan ID if set, None otherwise.
    """
    return structlog.contextvars.get_contextvars().get("scan_id")
