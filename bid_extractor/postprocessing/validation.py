"""
Validation — schema and contract checks for parser output and bid records.

Implements:
- Schema conformance (jsonschema, every leaf required and typed)
- Contract conformance (pydantic BidRecord)
- Quality warnings (sparse parses, placeholder-only records)

Validators never raise; they return a ValidationResult. The pipeline decides
whether a failure blocks persistence.
"""
import logging
from typing import List

from jsonschema import Draft7Validator
from pydantic import ValidationError as PydanticValidationError

from bid_extractor.config.schemas import BID_RECORD_SCHEMA, PARSED_EMAIL_SCHEMA
from bid_extractor.models.bid_record import BidRecord
from bid_extractor.models.validation import ValidationResult
from bid_extractor.postprocessing.metrics import record_validation_error

logger = logging.getLogger(__name__)

_PARSED_EMAIL_VALIDATOR = Draft7Validator(PARSED_EMAIL_SCHEMA)
_BID_RECORD_VALIDATOR = Draft7Validator(BID_RECORD_SCHEMA)


class ExtractionValidationError(ValueError):
    """Raised by the pipeline when a stage's output fails validation."""

    def __init__(self, stage: str, errors: List[str]) -> None:
        self.stage = stage
        self.errors = errors
        super().__init__(f"Validation failed at stage '{stage}': {errors}")


def _schema_errors(validator: Draft7Validator, data: dict) -> List[str]:
    return [
        f"schema: {'/'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
        for error in sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    ]


def validate_parsed_email(data: dict) -> ValidationResult:
    """
    Validate ParsedEmail.to_dict() output against PARSED_EMAIL_SCHEMA.

    Warnings flag parses that found no structure at all (valid, but sparse).
    """
    if not isinstance(data, dict):
        record_validation_error("parsed_email", "not_an_object")
        return ValidationResult(valid=False, errors=["parsed email must be an object"])

    errors = _schema_errors(_PARSED_EMAIL_VALIDATOR, data)
    warnings: List[str] = []

    if errors:
        for _ in errors:
            record_validation_error("parsed_email", "schema_mismatch")
        return ValidationResult(valid=False, errors=errors)

    if not any(data["signature"].values()):
        warnings.append("signature: no closing block found")
    structured = {k: v for k, v in data["sections"].items() if k != "generalNotes"}
    if not any(structured.values()):
        warnings.append("sections: no structured section found, general notes only")

    return ValidationResult(valid=True, warnings=warnings, data=data)


def validate_bid_record(record: dict) -> ValidationResult:
    """
    Validate a bid record against BID_RECORD_SCHEMA and the BidRecord model.

    Returns:
        ValidationResult whose data is the pydantic-normalized record dict.
    """
    if not isinstance(record, dict):
        record_validation_error("bid_record", "not_an_object")
        return ValidationResult(valid=False, errors=["bid record must be an object"])

    errors = _schema_errors(_BID_RECORD_VALIDATOR, record)
    if errors:
        for _ in errors:
            record_validation_error("bid_record", "schema_mismatch")
        return ValidationResult(valid=False, errors=errors)

    try:
        model = BidRecord.model_validate(record)
    except PydanticValidationError as exc:
        record_validation_error("bid_record", "contract_mismatch")
        return ValidationResult(
            valid=False,
            errors=[f"contract: {'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()],
        )

    warnings: List[str] = []
    if not model.project and not model.gc:
        warnings.append("record: neither project nor gc could be extracted")
    if not model.bidDate:
        warnings.append("record: no bid date found")

    return ValidationResult(valid=True, warnings=warnings, data=model.model_dump())
