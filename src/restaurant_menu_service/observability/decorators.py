"""OpenTelemetry tracing decorators."""

import functools
import inspect
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Span

F = TypeVar("F", bound=Callable[..., Any])


def traced(span_name: str | None = None, service_name: str = "menu-svc") -> Callable[[F], F]:
    """Decorator to run a function inside an OpenTelemetry span.

    The span is marked with a ``success`` attribute; on failure the exception
    type and message are recorded and the exception is re-raised. Both plain
    and async functions are supported.

    Args:
        span_name: Name for the span (defaults to the function name)
        service_name: Service name for span attributes and tracer lookup

    Returns:
        Decorated function with tracing

    Example:
        @traced("menu.create_item")
        async def create_item(self, payload: dict) -> MenuItem:
            ...
    """

    def decorator(func: F) -> F:
        name = span_name or func.__name__
        tracer = trace.get_tracer(service_name)

        @contextmanager
        def span_scope() -> Iterator[Span]:
            with tracer.start_as_current_span(name) as span:
                span.set_attribute("service.name", service_name)
                if span_name:
                    span.set_attribute("function.name", func.__name__)
                try:
                    yield span
                except Exception as e:
                    span.set_attribute("success", False)
                    span.set_attribute("error.type", type(e).__name__)
                    span.set_attribute("error.message", str(e))
                    span.record_exception(e)
                    raise
                span.set_attribute("success", True)

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with span_scope():
                return await func(*args, **kwargs)

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with span_scope():
                return func(*args, **kwargs)

        if inspect.iscoroutinefunction(func):
            return async_wrapper  # type: ignore
        return sync_wrapper  # type: ignore

    return decorator
