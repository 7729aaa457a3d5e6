"""Correlation ID utilities for request tracing across Word Counter."""

import re
import uuid
from contextvars import ContextVar, Token

import structlog

CORRELATION_HEADER = "X-Correlation-ID"

# Accept client supplied ids only if they are short and log-safe
_VALID_CORRELATION_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

# Context variable to store the current correlation ID
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id(prefix: str = "req") -> str:
    """Generate a new correlation ID with optional prefix.

    Args:
        prefix: Optional prefix for the correlation ID (default: "req")

    Returns:
        A new correlation ID in format: prefix_xxxxxxxx
    """
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


def resolve_correlation_id(candidate: str | None, prefix: str = "req") -> str:
    """Use a client supplied correlation ID when valid, otherwise generate one."""
    if candidate and _VALID_CORRELATION_ID.match(candidate):
        return candidate
    return generate_correlation_id(prefix)


def set_correlation_id(correlation_id: str) -> Token:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The correlation ID to set

    Returns:
        Token that restores the previous value when passed to reset_correlation_id
    """
    token = _correlation_id.set(correlation_id)

    # Also set it in structlog's context variables for automatic inclusion
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
    return token


def reset_correlation_id(token: Token) -> None:
    """Restore the correlation ID that was active before set_correlation_id."""
    _correlation_id.reset(token)
    structlog.contextvars.unbind_contextvars("correlation_id")


def get_correlation_id() -> str | None:
    """Get the current correlation ID from context.

    Returns:
        The current correlation ID or None if not set
    """
    return _correlation_id.get()
