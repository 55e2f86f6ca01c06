"""
Email Structure Parser — orchestrates Signature + Sections + Thread + Metadata.

Pipeline:
    1. Signature extraction (closing block)
    2. Section identification (labeled fields / blocks, general notes)
    3. Thread splitting (reply / forward / Outlook boundaries)
    4. Metadata extraction (bid time, PM, pre-bid meeting, addenda, bonds)

The four sub-parsers are independent pure functions of the same input; their
order here has no effect on the result.
"""
import logging

from bid_extractor.email_parser.metadata import extract_metadata
from bid_extractor.email_parser.sections import identify_sections
from bid_extractor.email_parser.signature import extract_signature
from bid_extractor.email_parser.thread import extract_thread_messages
from bid_extractor.models.parsed_email import ParsedEmail
from bid_extractor.postprocessing.metrics import record_field_hit, timed_stage

logger = logging.getLogger(__name__)


def parse_full_email(text: str) -> ParsedEmail:
    """
    Run all four sub-parsers over *text* and merge their outputs.

    Args:
        text: Plain-text email body (already HTML-stripped).

    Returns:
        ParsedEmail; always fully populated with defaults, never raises.
    """
    with timed_stage("signature"):
        signature = extract_signature(text)
    with timed_stage("sections"):
        sections = identify_sections(text)
    with timed_stage("thread"):
        thread = extract_thread_messages(text)
    with timed_stage("metadata"):
        metadata = extract_metadata(text)

    parsed = ParsedEmail(
        signature=signature,
        sections=sections,
        thread=tuple(thread),
        metadata=metadata,
    )

    hits = _record_hits(parsed)
    logger.debug(
        "Parsed email: %d thread messages, fields=%s", len(parsed.thread), hits
    )
    return parsed


def _record_hits(parsed: ParsedEmail) -> list:
    """Count populated fields for metrics; returns their dotted names."""
    data = parsed.to_dict()
    hits = []

    for group in ("signature", "sections"):
        for key, value in data[group].items():
            if value:
                hits.append(f"{group}.{key}")

    metadata = data["metadata"]
    for key in ("bidTime", "projectManager", "addenda", "bondRequirements"):
        if metadata[key]:
            hits.append(f"metadata.{key}")
    if any(metadata["preBidMeeting"].values()):
        hits.append("metadata.preBidMeeting")

    for name in hits:
        record_field_hit(name)
    return hits
