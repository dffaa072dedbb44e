"""ToolBank core: error types and observability."""
from toolbank.core.errors import InvalidInput
from toolbank.core.observability import Tracer, trace_calculation, metrics, get_metrics_summary

__all__ = [
    "InvalidInput",
    "Tracer",
    "trace_calculation",
    "metrics",
    "get_metrics_summary",
]
