"""Optional observability hooks."""

from .trace import Tracer

__all__ = ["Tracer"]
