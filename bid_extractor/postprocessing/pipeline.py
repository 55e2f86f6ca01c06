"""
Pipeline Orchestrator — main entry point for bid email post-processing.

Executes the 5-stage pipeline:
    1. Parse (signature / sections / thread / metadata)
    2. Validate parser output (schema)
    3. Record assembly (field fallbacks, bid date detection)
    4. Priority scoring (rule-based)
    5. Record validation (schema + contract) + persistence
"""
import logging
import time
from typing import List, Optional

from bid_extractor.config.constants import PARSER_VERSION
from bid_extractor.config.settings import MAX_BODY_LOG_CHARS
from bid_extractor.email_parser.pipeline import parse_full_email
from bid_extractor.postprocessing.extraction_store import ExtractionStore
from bid_extractor.postprocessing.metrics import timed_stage
from bid_extractor.postprocessing.output_builder import build_bid_record
from bid_extractor.postprocessing.priority_scorer import BidPriorityScorer, priority_scorer
from bid_extractor.postprocessing.validation import (
    ExtractionValidationError,
    validate_bid_record,
    validate_parsed_email,
)

logger = logging.getLogger(__name__)


def process_bid_email(
    body: str,
    subject: str = "",
    sender_name: str = "",
    sender_email: str = "",
    message_id: str = "",
    attachments: Optional[List[dict]] = None,
    bid_date: str = "",
    scorer: Optional[BidPriorityScorer] = None,
    store: Optional[ExtractionStore] = None,
) -> dict:
    """
    Main post-processing pipeline for one bid email.

    Args:
        body: Plain-text email body supplied by the DOM scraper.
        subject: Email subject line.
        sender_name: Display name of the sender.
        sender_email: Sender address.
        message_id: Message identifier used as the storage key.
        attachments: [{"name": ..., "url": ..., "type": ...}] from the scraper.
        bid_date: Bid date already known to the caller; detected if empty.
        scorer: BidPriorityScorer instance. Defaults to module-level scorer.
        store: ExtractionStore. The record is not persisted when None.

    Returns:
        {"record": <validated bid record>, "diagnostics": {...}, "processing_metadata": {...}}

    Raises:
        ExtractionValidationError: If the parser output or the record fails validation.
    """
    start_time = time.monotonic()

    if scorer is None:
        scorer = priority_scorer

    logger.debug(
        "Processing bid email %s: %s", message_id or "<no id>", str(body or "")[:MAX_BODY_LOG_CHARS]
    )

    # ==================================================================
    # Stage 1: Parse
    # ==================================================================
    parsed = parse_full_email(body)

    # ==================================================================
    # Stage 2: Validate parser output
    # ==================================================================
    parsed_validation = validate_parsed_email(parsed.to_dict())
    if not parsed_validation.valid:
        logger.error("Parser output validation failed: %s", parsed_validation.errors)
        raise ExtractionValidationError("parsed_email", parsed_validation.errors)

    # ==================================================================
    # Stage 3: Record assembly
    # ==================================================================
    with timed_stage("record_assembly"):
        record = build_bid_record(
            parsed,
            subject=subject,
            sender_name=sender_name,
            sender_email=sender_email,
            message_id=message_id,
            attachments=attachments,
            bid_date=bid_date,
        )

    # ==================================================================
    # Stage 4: Priority scoring
    # ==================================================================
    with timed_stage("priority_scoring"):
        record["priority"] = scorer.score(record)

    # ==================================================================
    # Stage 5: Record validation + persistence
    # ==================================================================
    record_validation = validate_bid_record(record)
    if not record_validation.valid:
        logger.error("Bid record validation failed: %s", record_validation.errors)
        raise ExtractionValidationError("bid_record", record_validation.errors)

    assert record_validation.data is not None
    validated: dict = record_validation.data

    persisted = False
    if store is not None:
        persisted = store.save(validated)

    elapsed_ms = int((time.monotonic() - start_time) * 1000)
    logger.info(
        "Bid email %s processed in %d ms (priority=%s)",
        message_id or "<no id>", elapsed_ms, validated["priority"]["label"],
    )

    return {
        "record": validated,
        "diagnostics": {
            "warnings": parsed_validation.warnings + record_validation.warnings,
            "persisted": persisted,
        },
        "processing_metadata": {
            "parser_version": PARSER_VERSION,
            "processing_duration_ms": elapsed_ms,
            "thread_messages": len(parsed.thread),
            "addenda_found": len(parsed.metadata.addenda),
        },
    }
