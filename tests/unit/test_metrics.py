"""
Unit tests for bid_extractor.postprocessing.metrics.

Reads sample values back from the default prometheus registry, so every
assertion compares against the value observed before the call.
"""
from __future__ import annotations

from prometheus_client import REGISTRY

from bid_extractor.postprocessing.metrics import (
    record_field_hit,
    record_store_write,
    record_validation_error,
    timed_stage,
)


def _sample(name: str, labels: dict) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetricHelpers:

    def test_record_field_hit(self):
        labels = {"field_name": "sections.scope"}
        before = _sample("bid_extractor_field_hits_total", labels)
        record_field_hit("sections.scope")
        assert _sample("bid_extractor_field_hits_total", labels) == before + 1

    def test_record_validation_error(self):
        labels = {"stage_name": "bid_record", "error_type": "schema_mismatch"}
        before = _sample("bid_extractor_validation_errors_total", labels)
        record_validation_error("bid_record", "schema_mismatch")
        assert _sample("bid_extractor_validation_errors_total", labels) == before + 1

    def test_record_validation_error_default_type(self):
        labels = {"stage_name": "parsed_email", "error_type": "generic"}
        before = _sample("bid_extractor_validation_errors_total", labels)
        record_validation_error("parsed_email")
        assert _sample("bid_extractor_validation_errors_total", labels) == before + 1

    def test_record_store_write(self):
        before = _sample("bid_extractor_store_writes_total", {"outcome": "failed"})
        record_store_write("failed")
        assert _sample("bid_extractor_store_writes_total", {"outcome": "failed"}) == before + 1

    def test_timed_stage_observes_latency(self):
        labels = {"stage_name": "unit_test_stage"}
        before = _sample("bid_extractor_stage_processing_seconds_count", labels)
        with timed_stage("unit_test_stage"):
            pass
        assert _sample("bid_extractor_stage_processing_seconds_count", labels) == before + 1

    def test_timed_stage_propagates_exceptions(self):
        labels = {"stage_name": "failing_stage"}
        before = _sample("bid_extractor_stage_processing_seconds_count", labels)
        try:
            with timed_stage("failing_stage"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert _sample("bid_extractor_stage_processing_seconds_count", labels) == before + 1


class TestParserInstrumentation:

    def test_parse_records_component_latency(self, structured_bid_email):
        from bid_extractor.email_parser.pipeline import parse_full_email

        labels = {"stage_name": "sections"}
        before = _sample("bid_extractor_stage_processing_seconds_count", labels)
        parse_full_email(structured_bid_email)
        assert _sample("bid_extractor_stage_processing_seconds_count", labels) == before + 1

    def test_parse_records_field_hits(self, structured_bid_email):
        from bid_extractor.email_parser.pipeline import parse_full_email

        labels = {"field_name": "metadata.bidTime"}
        before = _sample("bid_extractor_field_hits_total", labels)
        parse_full_email(structured_bid_email)
        assert _sample("bid_extractor_field_hits_total", labels) == before + 1
