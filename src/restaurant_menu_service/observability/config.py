"""OpenTelemetry and logging configuration."""

import logging
import os
from typing import Any

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from pythonjsonlogger import jsonlogger

logger = logging.getLogger(__name__)

DEFAULT_OTLP_ENDPOINT = "http://localhost:4318"
METRIC_EXPORT_INTERVAL_MILLIS = 60000


def get_service_resource() -> Resource:
    """Create OpenTelemetry resource with service identification.

    Returns:
        Resource with service name and environment attributes
    """
    return Resource.create(
        {
            "service.name": os.getenv("OTEL_SERVICE_NAME", "menu-svc"),
            "deployment.environment": os.getenv("ENVIRONMENT", "development"),
        }
    )


def build_tracer_provider(resource: Resource, endpoint: str | None) -> TracerProvider:
    """Build a tracer provider, shipping spans over OTLP when an endpoint is given.

    Args:
        resource: Service resource attached to every span
        endpoint: OTLP collector base URL, or None to keep spans local

    Returns:
        TracerProvider ready to be installed globally
    """
    provider = TracerProvider(resource=resource)
    if endpoint:
        exporter = OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces")
        provider.add_span_processor(BatchSpanProcessor(exporter))
    return provider


def build_meter_provider(resource: Resource, endpoint: str | None) -> MeterProvider:
    """Build a meter provider, exporting measurements over OTLP when an endpoint is given.

    Args:
        resource: Service resource attached to every measurement
        endpoint: OTLP collector base URL, or None to keep measurements local

    Returns:
        MeterProvider ready to be installed globally
    """
    if not endpoint:
        return MeterProvider(resource=resource)

    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=f"{endpoint}/v1/metrics"),
        export_interval_millis=METRIC_EXPORT_INTERVAL_MILLIS,
    )
    return MeterProvider(resource=resource, metric_readers=[reader])


def setup_observability(app: Any = None, enable_exporters: bool = True) -> None:
    """Install tracer and meter providers and instrument the app.

    Args:
        app: Optional FastAPI application to instrument
        enable_exporters: Whether to ship telemetry over OTLP; ENVIRONMENT=test
            always turns this off
    """
    if os.getenv("ENVIRONMENT", "development") == "test":
        enable_exporters = False

    endpoint = (
        os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", DEFAULT_OTLP_ENDPOINT) if enable_exporters else None
    )
    resource = get_service_resource()

    trace.set_tracer_provider(build_tracer_provider(resource, endpoint))
    metrics.set_meter_provider(build_meter_provider(resource, endpoint))
    logger.info(f"OpenTelemetry providers installed, OTLP endpoint: {endpoint or 'disabled'}")

    if app is not None:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI application instrumented")


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structured JSON logging on the root logger.

    LOG_LEVEL, when set, takes precedence over the argument. Any handlers
    already on the root logger are replaced.

    Args:
        log_level: Logging level name used when LOG_LEVEL is unset
    """
    level_name = os.getenv("LOG_LEVEL", log_level).upper()

    handler = logging.StreamHandler()
    handler.setFormatter(
        jsonlogger.JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s", timestamp=True)
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))

    logger.info(f"Structured JSON logging configured at {level_name} level")
