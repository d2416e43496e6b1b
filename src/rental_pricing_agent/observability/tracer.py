"""
Tracer Factory

get_tracer() hands out one tracer per process: an OpenTelemetry-backed
one once init_phoenix has installed an SDK provider, a no-op one
otherwise. Callers never branch on which they got.

Spans expose set_attributes(mapping) so the dicts built by
observability.attributes can be attached in one call.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Protocol

from rental_pricing_agent.config import PROJECT_NAME, get_settings

SERVICE_NAME = PROJECT_NAME


class SpanProtocol(Protocol):
    def set_attribute(self, key: str, value: Any) -> None:
        ...

    def set_attributes(self, attributes: Mapping[str, Any]) -> None:
        ...

    def set_status(self, status: str, description: str | None = None) -> None:
        """status is "ok" or "error"."""
        ...

    def record_exception(self, exception: BaseException) -> None:
        ...


class TracerProtocol(Protocol):
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Any:
        """Context manager yielding a SpanProtocol."""
        ...


# ---------------------------------------------------------------------------
# DISABLED TRACING
# ---------------------------------------------------------------------------


class NoOpSpan:
    """Accepts everything, records nothing."""

    def set_attribute(self, key: str, value: Any) -> None:
        pass

    def set_attributes(self, attributes: Mapping[str, Any]) -> None:
        pass

    def set_status(self, status: str, description: str | None = None) -> None:
        pass

    def record_exception(self, exception: BaseException) -> None:
        pass


class NoOpTracer:

    @contextmanager
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[NoOpSpan]:
        yield NoOpSpan()


# ---------------------------------------------------------------------------
# OPENTELEMETRY
# ---------------------------------------------------------------------------


class OTelSpan:
    """Adapts an OTel span to SpanProtocol."""

    def __init__(self, span: Any):
        self._span = span

    def set_attribute(self, key: str, value: Any) -> None:
        self._span.set_attribute(key, value)

    def set_attributes(self, attributes: Mapping[str, Any]) -> None:
        self._span.set_attributes(dict(attributes))

    def set_status(self, status: str, description: str | None = None) -> None:
        from opentelemetry.trace import StatusCode

        if status == "ok":
            self._span.set_status(StatusCode.OK)
        else:
            self._span.set_status(StatusCode.ERROR, description)

    def record_exception(self, exception: BaseException) -> None:
        self._span.record_exception(exception)


class OTelTracer:

    def __init__(self, tracer: Any):
        self._tracer = tracer

    @contextmanager
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[OTelSpan]:
        with self._tracer.start_as_current_span(name, attributes=attributes) as span:
            yield OTelSpan(span)


# ---------------------------------------------------------------------------
# FACTORY
# ---------------------------------------------------------------------------


def _build_tracer(service_name: str) -> TracerProtocol:
    if not get_settings().phoenix.enabled:
        return NoOpTracer()

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.trace import TracerProvider
    except ImportError:
        return NoOpTracer()

    # The API's default proxy provider means init_phoenix has not run
    if not isinstance(trace.get_tracer_provider(), TracerProvider):
        return NoOpTracer()

    return OTelTracer(trace.get_tracer(service_name))


_tracer: TracerProtocol | None = None


def get_tracer(service_name: str = SERVICE_NAME) -> TracerProtocol:
    """
    Process-wide tracer, built on first call.

    service_name only matters on the first call; reset_tracer() forces a
    rebuild (init_phoenix does this after installing the provider).
    """
    global _tracer
    if _tracer is None:
        _tracer = _build_tracer(service_name)
    return _tracer


def reset_tracer() -> None:
    global _tracer
    _tracer = None
