"""
Prometheus Metrics — parser and pipeline observability.

Exposes counters and histograms for:
- Parse latency per component (signature / sections / thread / metadata)
- Field hits per extracted field (how often each field is populated)
- Validation errors per stage
- Extraction store writes by outcome

Usage
-----
    from bid_extractor.postprocessing.metrics import timed_stage, record_field_hit

    with timed_stage("sections"):
        sections = identify_sections(text)

    record_field_hit("sections.scope")
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Processing latency per parser component / pipeline stage (seconds).
STAGE_LATENCY: Histogram = Histogram(
    "bid_extractor_stage_processing_seconds",
    "Processing time per parser component or pipeline stage in seconds",
    ["stage_name"],
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)

# How often each output field was populated.
FIELD_HITS: Counter = Counter(
    "bid_extractor_field_hits_total",
    "Number of parses that populated a given output field",
    ["field_name"],
)

# Total validation errors, labelled by stage and error type.
VALIDATION_ERRORS: Counter = Counter(
    "bid_extractor_validation_errors_total",
    "Total validation errors by stage and error type",
    ["stage_name", "error_type"],
)

# Extraction store writes by outcome ("ok" | "failed" | "skipped").
STORE_WRITES: Counter = Counter(
    "bid_extractor_store_writes_total",
    "Extraction store writes by outcome",
    ["outcome"],
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_field_hit(field_name: str) -> None:
    """Increment the field hit counter for *field_name*."""
    FIELD_HITS.labels(field_name=field_name).inc()


def record_validation_error(stage_name: str, error_type: str = "generic") -> None:
    """Increment the validation error counter for *stage_name*."""
    VALIDATION_ERRORS.labels(stage_name=stage_name, error_type=error_type).inc()


def record_store_write(outcome: str) -> None:
    """Increment the store write counter for *outcome*."""
    STORE_WRITES.labels(outcome=outcome).inc()


@contextmanager
def timed_stage(stage_name: str) -> Generator[None, None, None]:
    """
    Context manager that records stage processing latency.

    Usage::

        with timed_stage("thread"):
            messages = extract_thread_messages(text)
    """
    with STAGE_LATENCY.labels(stage_name=stage_name).time():
        yield
