# product_api/telemetry.py

import logging
from dataclasses import dataclass
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from product_api.config import ENV, SERVICE_NAME, SERVICE_VERSION, OTLP_TRACES_ENDPOINT
from product_api.logger import get_logger

log = get_logger(__name__)


@dataclass
class Observability:
  """Tracer and logger handed to request handling code"""
  tracer: trace.Tracer
  log: logging.Logger


def configure_tracing(environment: str = ENV) -> TracerProvider:
  """
  Install global tracer provider for the service.
  Spans go to the console in development and to an OTLP collector when
  OTEL_EXPORTER_OTLP_TRACES_ENDPOINT is set.
  """
  resource = Resource.create({
    "service.name": SERVICE_NAME,
    "service.version": SERVICE_VERSION,
    "deployment.environment": environment,
  })
  provider = TracerProvider(resource=resource)

  if environment == "development":
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

  if OTLP_TRACES_ENDPOINT:
    from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=OTLP_TRACES_ENDPOINT)))
    log.info(f"Exporting traces to {OTLP_TRACES_ENDPOINT}")

  trace.set_tracer_provider(provider)
  return provider


def get_observability() -> Observability:
  """Dependency: tracer from the global provider plus the product handler logger"""
  return Observability(
    tracer=trace.get_tracer(SERVICE_NAME, SERVICE_VERSION),
    log=get_logger("product_api.handlers"),
  )
