# lexmorph/shared/observability.py
from typing import Optional

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider

from lexmorph.shared.config import Settings, settings as default_settings


def setup_observability(settings: Optional[Settings] = None) -> TracerProvider:
    """
    Configures OpenTelemetry for the library.

    1. Defines the service Resource.
    2. Sets the Global Tracer Provider.

    No exporter is attached: spans are still created so that trace and span
    ids reach the structured logs. Attach an exporter to the returned
    provider to ship spans elsewhere.
    """
    settings = settings or default_settings

    resource = Resource.create(attributes={
        "service.name": settings.OTEL_SERVICE_NAME,
        "service.environment": settings.APP_ENV.value,
    })

    provider = TracerProvider(resource=resource)
    trace.set_tracer_provider(provider)
    return provider


def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in Use Cases.
    Usage:
        tracer = get_tracer(__name__)
        with tracer.start_as_current_span("my_custom_logic"):
            ...
    """
    return trace.get_tracer(name)
