"""Tests for per-context correlation vector management."""

import contextvars

from correlationvector.observability.correlation import (
    get_correlation_vector,
    reset_correlation_vector,
    set_correlation_vector,
)
from correlationvector.vector import CorrelationVector


class TestCorrelationVectorContext:
    """Tests for correlation vector context management."""

    def test_set_and_get_correlation_vector(self) -> None:
        """Test setting and getting the vector from context."""
        cv = CorrelationVector("ABCDEFGHIJKLMNOP", 3)

        token = set_correlation_vector(cv)
        try:
            assert get_correlation_vector() is cv
        finally:
            reset_correlation_vector(token)

    def test_reset_restores_previous(self) -> None:
        outer = CorrelationVector("ABCDEFGHIJKLMNOP", 1)
        inner = CorrelationVector("ABCDEFGHIJKLMNOP.1", 0)

        outer_token = set_correlation_vector(outer)
        inner_token = set_correlation_vector(inner)
        assert get_correlation_vector() is inner

        reset_correlation_vector(inner_token)
        assert get_correlation_vector() is outer

        reset_correlation_vector(outer_token)

    def test_get_correlation_vector_when_not_set(self) -> None:
        """Test a fresh context has no vector."""
        context = contextvars.Context()

        assert context.run(get_correlation_vector) is None

    def test_correlation_vector_isolated_in_context(self) -> None:
        """Test increments in a copied context stay with that context's vector."""
        cv = CorrelationVector("ABCDEFGHIJKLMNOP")
        token = set_correlation_vector(cv)

        def handle_request() -> str:
            set_correlation_vector(CorrelationVector("QRSTUVWXYZabcdef"))
            return get_correlation_vector().increment()

        try:
            assert contextvars.copy_context().run(handle_request) == "QRSTUVWXYZabcdef.1"
            assert get_correlation_vector() is cv
            assert cv.extension == 0
        finally:
            reset_correlation_vector(token)
