import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from toolbank.core.observability import metrics


@pytest.fixture
def fresh_metrics():
    """Reset the global calculation metrics around a test."""
    metrics.reset()
    yield metrics
    metrics.reset()
