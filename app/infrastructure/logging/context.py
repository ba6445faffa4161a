"""Execution-context binding for structured logging.

Every execution context (one per worker or script VM) gets an id, and all
log entries emitted while serving that context carry it.

Usage:
    from infrastructure.logging import bind_context

    with bind_context(context_id="worker-1"):
        logger.info("lookup_started")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_context(
    context_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind execution-context metadata to all logs within the block.

    Args:
        context_id: Execution context identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"context_id": context_id or str(uuid.uuid4())}
    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
