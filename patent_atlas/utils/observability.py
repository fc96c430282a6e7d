"""Observability utilities for tracing, metrics, and logging."""

import asyncio
from functools import wraps
from typing import Any, Dict, Optional

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from prometheus_client.registry import CollectorRegistry

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


def setup_tracing(service_name: str, service_version: str = "1.0.0"):
    """Setup OpenTelemetry tracing."""
    try:
        resource = Resource.create({
            "service.name": service_name,
            "service.version": service_version,
        })

        provider = TracerProvider(resource=resource)
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        trace.set_tracer_provider(provider)

        # Outgoing calls to the patent service
        HTTPXClientInstrumentor().instrument()

        logger.info("OpenTelemetry tracing initialized", service_name=service_name)

    except Exception as e:
        logger.error("Failed to setup tracing", error=str(e))


class Metrics:
    """Prometheus metrics collection."""

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry or CollectorRegistry()

        self.search_queries = Counter(
            'patent_search_queries_total',
            'Total patent searches by the source that answered',
            ['source'],
            registry=self.registry
        )

        self.fallbacks = Counter(
            'patent_service_fallbacks_total',
            'Service calls answered from the embedded dataset',
            ['operation'],
            registry=self.registry
        )

        self.service_request_duration = Histogram(
            'patent_service_request_duration_seconds',
            'Patent service request duration',
            ['operation'],
            registry=self.registry
        )

        self.comparisons = Counter(
            'patent_comparisons_total',
            'Total patent comparisons by similarity band',
            ['band'],
            registry=self.registry
        )

        self.stale_responses = Counter(
            'patent_stale_responses_total',
            'Responses dropped because a newer request was issued',
            ['command'],
            registry=self.registry
        )

        self.markers_on_map = Gauge(
            'patent_markers_on_map',
            'Number of patent markers currently placed',
            registry=self.registry
        )


# Global metrics instance
metrics = Metrics()


def trace_span(span_name: str, attributes: Optional[Dict[str, Any]] = None):
    """Decorator to create a trace span."""
    def decorator(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            tracer = trace.get_tracer(__name__)
            with tracer.start_as_current_span(span_name, attributes=attributes or {}) as span:
                try:
                    result = await func(*args, **kwargs)
                    span.set_status(Status(StatusCode.OK))
                    return result
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.record_exception(e)
                    raise

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            tracer = trace.get_tracer(__name__)
            with tracer.start_as_current_span(span_name, attributes=attributes or {}) as span:
                try:
                    result = func(*args, **kwargs)
                    span.set_status(Status(StatusCode.OK))
                    return result
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.record_exception(e)
                    raise

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator


def get_metrics(registry: Optional[CollectorRegistry] = None):
    """Get Prometheus metrics."""
    return generate_latest(registry or metrics.registry), CONTENT_TYPE_LATEST


def log_event(event_type: str, **kwargs):
    """Log a structured event."""
    logger.info(f"Event: {event_type}", event_type=event_type, **kwargs)


def log_error(error_type: str, error: Exception, **kwargs):
    """Log a structured error."""
    logger.error(f"Error: {error_type}",
                 error_type=error_type,
                 error_message=str(error),
                 error_class=error.__class__.__name__,
                 **kwargs)


def log_performance(operation: str, duration: float, **kwargs):
    """Log performance metrics."""
    logger.info(f"Performance: {operation}",
                operation=operation,
                duration=duration,
                **kwargs)
