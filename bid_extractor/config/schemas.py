"""
JSON Schemas for parser output and persisted bid records.

Two schemas:
1. PARSED_EMAIL_SCHEMA — what parse_full_email(...).to_dict() must produce
2. BID_RECORD_SCHEMA   — the extraction record handed to storage/export

Every leaf is required and typed: downstream consumers (scoring, display,
storage) read fields unconditionally.
"""

_STRING = {"type": "string"}


def _strings_object(*keys: str) -> dict:
    return {
        "type": "object",
        "additionalProperties": False,
        "required": list(keys),
        "properties": {key: _STRING for key in keys},
    }


PRE_BID_MEETING_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "required": ["date", "location", "mandatory"],
    "properties": {
        "date": _STRING,
        "location": _STRING,
        "mandatory": {"type": "boolean"},
    },
}

THREAD_MESSAGE_SCHEMA: dict = _strings_object("sender", "date", "body")

# =============================================================================
# 1. Parsed email (orchestrator output)
# =============================================================================
PARSED_EMAIL_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "additionalProperties": False,
    "required": ["signature", "sections", "thread", "metadata"],
    "properties": {
        "signature": _strings_object("name", "title", "company", "email", "phone"),
        "sections": _strings_object(
            "project",
            "location",
            "scope",
            "submissionInstructions",
            "preBidMeeting",
            "bondRequirements",
            "addenda",
            "generalNotes",
        ),
        "thread": {
            "type": "array",
            "items": THREAD_MESSAGE_SCHEMA,
        },
        "metadata": {
            "type": "object",
            "additionalProperties": False,
            "required": ["bidTime", "projectManager", "preBidMeeting", "addenda", "bondRequirements"],
            "properties": {
                "bidTime": _STRING,
                "projectManager": _STRING,
                "preBidMeeting": PRE_BID_MEETING_SCHEMA,
                "addenda": {"type": "array", "items": _STRING},
                "bondRequirements": _STRING,
            },
        },
    },
}

# =============================================================================
# 2. Bid record (storage / export)
# =============================================================================
BID_RECORD_SCHEMA: dict = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": [
        "messageId",
        "project",
        "gc",
        "bidDate",
        "bidTime",
        "location",
        "scope",
        "contact",
        "email",
        "phone",
        "projectManager",
        "submissionInstructions",
        "preBidMeeting",
        "addenda",
        "bondRequirements",
        "generalNotes",
        "threadMessages",
        "attachments",
        "rawSubject",
        "extractedAt",
    ],
    "properties": {
        "messageId": _STRING,
        "project": _STRING,
        "gc": _STRING,
        "bidDate": _STRING,
        "bidTime": _STRING,
        "location": _STRING,
        "scope": _STRING,
        "contact": _STRING,
        "email": _STRING,
        "phone": _STRING,
        "projectManager": _STRING,
        "submissionInstructions": _STRING,
        "preBidMeeting": PRE_BID_MEETING_SCHEMA,
        "addenda": {"type": "array", "items": _STRING},
        "bondRequirements": _STRING,
        "generalNotes": _STRING,
        "threadMessages": {"type": "array", "items": THREAD_MESSAGE_SCHEMA},
        "attachments": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name"],
                "properties": {
                    "name": _STRING,
                    "url": _STRING,
                    "type": _STRING,
                },
            },
        },
        "rawSubject": _STRING,
        "extractedAt": _STRING,
        "priority": {
            "type": "object",
            "required": ["score", "value", "label", "signals"],
            "properties": {
                "score": {"type": "number", "minimum": 0, "maximum": 100},
                "value": {"type": "string", "enum": ["high", "medium", "low"]},
                "label": _STRING,
                "signals": {"type": "array", "items": _STRING},
            },
        },
    },
}
