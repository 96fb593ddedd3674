"""Current correlation vector management for request tracing."""

import contextvars

from correlationvector.vector import CorrelationVector

# Each request context owns its vector; increments never cross contexts
_correlation_vector: contextvars.ContextVar[CorrelationVector | None] = (
    contextvars.ContextVar("correlation_vector", default=None)
)


def set_correlation_vector(
    correlation_vector: CorrelationVector | None,
) -> contextvars.Token[CorrelationVector | None]:
    """
    Set the correlation vector for the current context.

    Returns:
        Token that restores the previous vector via reset_correlation_vector
    """
    return _correlation_vector.set(correlation_vector)


def get_correlation_vector() -> CorrelationVector | None:
    """Get the correlation vector for the current context."""
    return _correlation_vector.get()


def reset_correlation_vector(
    token: contextvars.Token[CorrelationVector | None],
) -> None:
    """Restore the vector that was current before the matching set call."""
    _correlation_vector.reset(token)
