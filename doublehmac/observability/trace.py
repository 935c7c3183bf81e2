from __future__ import annotations

from contextlib import contextmanager, nullcontext

try:
    from opentelemetry import trace as _otel_trace
except Exception:  # pragma: no cover - optional dep
    _otel_trace = None


class Tracer:
    """Light wrapper around OpenTelemetry tracer.

    Spans carry only non-secret attributes such as algorithm names and input
    lengths.
    """

    def __init__(self, name: str = "doublehmac") -> None:
        self._tracer = _otel_trace.get_tracer(name) if _otel_trace else None

    @contextmanager
    def start_span(self, name: str, **attributes):
        if self._tracer:
            with self._tracer.start_as_current_span(name) as span:
                for key, value in attributes.items():
                    if value is not None:
                        span.set_attribute(f"doublehmac.{key}", value)
                yield
        else:
            with nullcontext():
                yield
