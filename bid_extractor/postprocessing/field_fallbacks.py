"""
Record field fallbacks for emails without labelled sections.

Used when the parser finds no "Project:" section or signature company:
    project ← subject line (RFQ/RFP/ITB/Bid prefixes), then a "Project:" body line
    gc      ← "GC:" body line or "<Name> Construction", then the sender name
    phone   ← first 10-digit phone number in the body
"""
import re

from bid_extractor.config.constants import (
    BODY_PROJECT_REGEX,
    FALLBACK_PHONE_REGEX,
    GC_BODY_PATTERNS,
    SENDER_COMPANY_REGEX,
    SUBJECT_PREFIX_REGEX,
    SUBJECT_PROJECT_PATTERNS,
)

_WHITESPACE = re.compile(r"\s+")
_EDGE_PUNCTUATION = re.compile(r"^[:\-\s]+|[:\-\s]+$")


def clean_text(text: str) -> str:
    """Collapse whitespace and trim leading/trailing colons and dashes."""
    if not text:
        return ""
    return _EDGE_PUNCTUATION.sub("", _WHITESPACE.sub(" ", text).strip())


def extract_project_name(subject: str, body: str) -> str:
    """
    Guess the project name from the subject, then the body.

    Returns:
        The cleaned project name, or the subject without RE/FW/RFQ prefixes.
    """
    subject = subject or ""

    for pattern in SUBJECT_PROJECT_PATTERNS:
        match = pattern.search(subject)
        if match:
            name = clean_text(match.group(1))
            if name:
                return name

    match = BODY_PROJECT_REGEX.search(body or "")
    if match:
        name = clean_text(match.group(1))
        if name:
            return name

    return clean_text(SUBJECT_PREFIX_REGEX.sub("", subject))


def extract_gc_name(sender_name: str, body: str) -> str:
    """
    Guess the general contractor from the body, then the sender display name.

    "Bob at Walsh Construction" yields "Walsh Construction"; a plain person
    name is returned as-is since it is the only lead available.
    """
    body = body or ""
    for pattern in GC_BODY_PATTERNS:
        match = pattern.search(body)
        if match:
            name = clean_text(match.group(1))
            if 3 < len(name) < 100:
                return name

    if not sender_name:
        return ""

    match = SENDER_COMPANY_REGEX.search(sender_name)
    if match:
        return clean_text(match.group(1))
    return clean_text(sender_name)


def extract_phone(body: str) -> str:
    """First phone number in the body as written, or ""."""
    match = FALLBACK_PHONE_REGEX.search(body or "")
    return match.group(1) if match else ""
