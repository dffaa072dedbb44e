"""Observability Module - Logging, Tracing, and Metrics

This module provides:
1. Structured logging for the calculators
2. Per-call calculation tracing
3. Aggregated call metrics (counts, failures, latency)
"""
import logging
import functools
import threading
from typing import Dict, Any, Optional, Callable
from dataclasses import dataclass, field
from datetime import datetime

from toolbank.config.settings import LOG_LEVEL

# Configure structured logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s | %(name)s | %(levelname)s | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

logger = logging.getLogger("toolbank")


@dataclass
class CalculationTrace:
    """Represents a single calculator invocation."""
    calculator: str
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    duration_ms: Optional[float] = None
    input_summary: str = ""
    success: bool = True
    error: Optional[str] = None

    def complete(self, success: bool = True, error: str = None):
        """Mark trace as complete."""
        self.end_time = datetime.now()
        self.duration_ms = (self.end_time - self.start_time).total_seconds() * 1000
        self.success = success
        self.error = error


@dataclass
class CalculationMetrics:
    """Aggregated metrics across calculator calls."""
    total_requests: int = 0
    successful_requests: int = 0
    failed_requests: int = 0
    total_latency_ms: float = 0
    calculator_calls: Dict[str, int] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def success_rate(self) -> float:
        if self.total_requests == 0:
            return 0.0
        return self.successful_requests / self.total_requests

    @property
    def avg_latency_ms(self) -> float:
        if self.total_requests == 0:
            return 0.0
        return self.total_latency_ms / self.total_requests

    def record(self, trace: CalculationTrace):
        """Record a trace into metrics."""
        with self._lock:
            self.total_requests += 1
            if trace.success:
                self.successful_requests += 1
            else:
                self.failed_requests += 1

            if trace.duration_ms:
                self.total_latency_ms += trace.duration_ms
            self.calculator_calls[trace.calculator] = self.calculator_calls.get(trace.calculator, 0) + 1

    def reset(self):
        with self._lock:
            self.total_requests = 0
            self.successful_requests = 0
            self.failed_requests = 0
            self.total_latency_ms = 0
            self.calculator_calls = {}

    def summary(self) -> Dict[str, Any]:
        """Return metrics summary."""
        with self._lock:
            return {
                "total_requests": self.total_requests,
                "failed_requests": self.failed_requests,
                "success_rate": f"{self.success_rate:.1%}",
                "avg_latency_ms": f"{self.avg_latency_ms:.3f}ms",
                "calculator_calls": dict(self.calculator_calls),
            }


# Global metrics instance
metrics = CalculationMetrics()


class Tracer:
    """Context manager for tracing a calculator call."""

    def __init__(self, calculator: str, input_data: Any = None):
        self.trace = CalculationTrace(calculator=calculator)
        if input_data:
            self.trace.input_summary = str(input_data)[:200]

    def __enter__(self):
        logger.debug(f"{self.trace.calculator} started ({self.trace.input_summary})")
        return self.trace

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.trace.complete(success=False, error=str(exc_val))
            logger.warning(f"{self.trace.calculator} rejected input: {exc_val}")
        else:
            self.trace.complete(success=True)
            logger.debug(f"{self.trace.calculator} completed in {self.trace.duration_ms:.3f}ms")

        metrics.record(self.trace)
        return False  # Don't suppress exceptions


def trace_calculation(func: Callable) -> Callable:
    """Decorator to trace a calculator function."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        summary = {"args": args, **kwargs} if args else kwargs
        with Tracer(func.__name__, summary):
            return func(*args, **kwargs)
    return wrapper


def get_metrics_summary() -> Dict[str, Any]:
    """Get current metrics summary."""
    return metrics.summary()
