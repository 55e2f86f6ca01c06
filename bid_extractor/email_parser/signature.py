"""
Signature Extractor — isolates the closing block and classifies its lines.

Lines after the earliest closing delimiter are split into:
    1. email   (first EMAIL_REGEX hit)
    2. phone   (labeled lines first, then bare numbers)
    3. name / title / company (first three remaining content lines)
"""
import logging
from typing import List

from bid_extractor.config.constants import (
    BARE_PHONE_LINE_REGEX,
    EMAIL_REGEX,
    PHONE_LABEL_REGEX,
    PHONE_LINE_REGEX,
    PHONE_REGEX,
    SIGNATURE_DELIMITERS,
)
from bid_extractor.email_parser.boundary import find_earliest_boundary
from bid_extractor.models.signature import SignatureBlock

logger = logging.getLogger(__name__)


def extract_signature(text: str) -> SignatureBlock:
    """
    Extract sender identity from the closing block of an email body.

    Args:
        text: Full email body text.

    Returns:
        SignatureBlock; every field is "" when no delimiter is found.
    """
    if not text or not isinstance(text, str):
        return SignatureBlock()

    delimiter = find_earliest_boundary(text, SIGNATURE_DELIMITERS)
    if delimiter is None:
        return SignatureBlock()

    block = text[delimiter.end:]
    lines = [line.strip() for line in block.split("\n") if line.strip()]
    if not lines:
        return SignatureBlock()

    email = _extract_email(lines)
    phone = _extract_phone(lines)
    content = [line for line in lines if _is_content_line(line)]

    logger.debug(
        "Signature block: %d lines, %d content lines", len(lines), len(content)
    )

    return SignatureBlock(
        name=content[0] if len(content) >= 1 else "",
        title=content[1] if len(content) >= 2 else "",
        company=content[2] if len(content) >= 3 else "",
        email=email,
        phone=phone,
    )


def _extract_email(lines: List[str]) -> str:
    for line in lines:
        match = EMAIL_REGEX.search(line)
        if match:
            return match.group(0)
    return ""


def _extract_phone(lines: List[str]) -> str:
    """First labeled phone number, else first bare number outside email-only lines."""
    for line in lines:
        if not PHONE_LINE_REGEX.search(line):
            continue
        cleaned = PHONE_LABEL_REGEX.sub("", line, count=1).strip()
        # "O: (972) 555-1234 | C: (469) 555-5678" -> first number
        first_segment = cleaned.split("|")[0].strip()
        match = PHONE_REGEX.search(first_segment)
        if match:
            return match.group(0).strip()

    for line in lines:
        if EMAIL_REGEX.search(line) and not PHONE_REGEX.search(line):
            continue
        match = PHONE_REGEX.search(line)
        if match:
            return match.group(0).strip()

    return ""


def _is_email_only(line: str) -> bool:
    return bool(EMAIL_REGEX.search(line)) and not EMAIL_REGEX.sub("", line).strip()


def _is_phone_line(line: str) -> bool:
    return bool(PHONE_LINE_REGEX.search(line) or BARE_PHONE_LINE_REGEX.match(line))


def _is_content_line(line: str) -> bool:
    if _is_email_only(line) or _is_phone_line(line):
        return False
    if "|" in line and PHONE_REGEX.search(line):
        return False
    return True
