"""Scoped logging context.

Fields pushed here (e.g. ``import_id``, ``source_name``) are attached to
every record emitted inside the scope by ``ContextualFilter``. Backed by
contextvars, so concurrent imports on one event loop keep separate context.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return the active logging context.

    Returns:
        Copy of the context fields; mutating it does not affect the scope
    """
    return LogContextVar.get().copy()


def push_log_context(**fields) -> Token:
    """Merge fields into the active context.

    Fields already present are overridden for the new scope and come back
    when the scope is popped.

    Args:
        **fields: Key-value pairs to attach to every log record

    Returns:
        Token for pop_log_context() to restore the previous context

    Example:
        >>> token = push_log_context(import_id="abc123")
        >>> # ... every record logged here carries import_id ...
        >>> pop_log_context(token)
    """
    return LogContextVar.set({**LogContextVar.get(), **fields})


def pop_log_context(token: Token) -> None:
    """Restore the context captured by push_log_context().

    Args:
        token: Token returned by the matching push_log_context() call
    """
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop every context field. Mostly for tests."""
    LogContextVar.set({})


class log_context:
    """Context manager pushing fields for the duration of a block.

    The previous context is restored on exit, including when the block
    raises.

    Example:
        >>> with log_context(import_id="abc123", source_name="export.csv"):
        ...     logger.info("Importing")  # carries import_id and source_name
    """

    def __init__(self, **fields):
        """Initialize the context manager.

        Args:
            **fields: Key-value pairs to attach inside the block
        """
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
