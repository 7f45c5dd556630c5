# summation/shared/telemetry.py
import logging
from typing import Optional

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from summation import __version__
from summation.shared.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

_configured = False

def setup_telemetry(settings: Optional[Settings] = None) -> bool:
    """
    Initializes the OpenTelemetry SDK with OTLP export.
    Should be called once at process startup; later calls are no-ops.

    Returns True when a tracer provider is installed.
    """
    global _configured
    settings = settings or default_settings

    if not settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info("Telemetry disabled: No OTEL_EXPORTER_OTLP_ENDPOINT configured.")
        return False

    if _configured:
        return True

    logger.info(f"Initializing Telemetry for service: {settings.OTEL_SERVICE_NAME}")

    # 1. Define Resource (Service Identity)
    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "deployment.environment": settings.APP_ENV.value,
        "service.version": __version__,
    })

    # 2. Configure Tracer Provider
    trace_provider = TracerProvider(resource=resource)

    # 3. Configure Exporter (Send data to Jaeger/Tempo)
    endpoint = settings.OTEL_EXPORTER_OTLP_ENDPOINT.rstrip("/")
    otlp_exporter = OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces")
    trace_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    # 4. Console Exporter for local debugging
    if settings.DEBUG:
        trace_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(trace_provider)
    _configured = True
    return True

def instrument_fastapi(app, settings: Optional[Settings] = None):
    """
    Auto-instruments the FastAPI application to trace incoming HTTP requests.
    """
    settings = settings or default_settings
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        FastAPIInstrumentor.instrument_app(app)

def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in specific modules.
    Without a configured provider this returns a no-op tracer.
    """
    return trace.get_tracer(name)
