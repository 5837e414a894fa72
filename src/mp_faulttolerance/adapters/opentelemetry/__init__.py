"""OpenTelemetry adapter – tracer."""
from mp_faulttolerance.adapters.opentelemetry.tracer import OtelTracer

__all__ = ["OtelTracer"]
