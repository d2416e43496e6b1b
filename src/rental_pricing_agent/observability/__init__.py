"""
Observability Module - Phoenix + OpenTelemetry Integration

Provides tracing for retrieval, agent runs and eval gates using
Arize Phoenix with OpenInference auto-instrumentation.

USAGE:
------
# At application startup:
from rental_pricing_agent.observability import init_phoenix

init_phoenix()  # Starts local Phoenix UI if PHOENIX_ENABLED=true

# In code that needs tracing:
from rental_pricing_agent.observability import get_tracer

tracer = get_tracer()
with tracer.start_span("my_operation", attributes={"key": "value"}) as span:
    # ... do work ...
    span.set_attribute("result", "success")
"""

from __future__ import annotations

import logging

from rental_pricing_agent.config import PhoenixConfig, get_settings
from rental_pricing_agent.observability.tracer import (
    TracerProtocol,
    SpanProtocol,
    NoOpTracer,
    NoOpSpan,
    get_tracer,
    reset_tracer,
)
from rental_pricing_agent.observability.attributes import (
    retrieval_attributes,
    agent_run_attributes,
    eval_gate_attributes,
    eval_case_attributes,
)

logger = logging.getLogger(__name__)

_phoenix_initialized = False


def init_phoenix(config: PhoenixConfig | None = None) -> bool:
    """
    Initialize Phoenix observability.

    Call once at application startup. Sets up the OpenTelemetry tracer
    provider and registers the OpenAI auto-instrumentor.

    Args:
        config: Optional config (defaults to get_settings().phoenix)

    Returns:
        True if Phoenix was initialized, False if disabled or unavailable
    """
    global _phoenix_initialized
    if _phoenix_initialized:
        return True

    config = config or get_settings().phoenix

    if not config.enabled:
        logger.debug("Phoenix observability disabled")
        return False

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
    except ImportError as e:
        logger.warning(f"OpenTelemetry SDK not installed, observability disabled: {e}")
        return False

    if config.collector_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
        except ImportError as e:
            logger.warning(f"OTLP exporter not installed, observability disabled: {e}")
            return False
        exporter = OTLPSpanExporter(endpoint=config.collector_endpoint)
        logger.info(f"Phoenix connecting to remote: {config.collector_endpoint}")
    else:
        try:
            import phoenix as px
            from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
        except ImportError as e:
            logger.warning(f"Phoenix not installed, observability disabled: {e}")
            return False
        session = px.launch_app()
        exporter = OTLPSpanExporter(endpoint=f"{session.url.rstrip('/')}/v1/traces")
        logger.info(f"Phoenix UI available at: {session.url}")

    provider = TracerProvider(
        resource=Resource.create({"openinference.project.name": config.project_name})
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    from rental_pricing_agent.observability.instrumentation import register_instrumentors

    register_instrumentors()
    reset_tracer()

    _phoenix_initialized = True
    return True


def shutdown_phoenix() -> None:
    """Flush spans and reset tracing state."""
    global _phoenix_initialized

    if not _phoenix_initialized:
        return

    from opentelemetry import trace

    provider = trace.get_tracer_provider()
    if hasattr(provider, "shutdown"):
        provider.shutdown()

    reset_tracer()
    _phoenix_initialized = False


__all__ = [
    # Initialization
    "init_phoenix",
    "shutdown_phoenix",
    # Config
    "PhoenixConfig",
    # Tracer
    "TracerProtocol",
    "SpanProtocol",
    "NoOpTracer",
    "NoOpSpan",
    "get_tracer",
    "reset_tracer",
    # Attribute helpers
    "retrieval_attributes",
    "agent_run_attributes",
    "eval_gate_attributes",
    "eval_case_attributes",
]
