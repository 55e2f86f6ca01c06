"""
Bid date parsing over a fixed set of formats.

Supported:
    MM/DD/YYYY
    YYYY-MM-DD
    Month DD, YYYY   (full or abbreviated month name)
"""
import re
from datetime import date
from typing import Optional

from bid_extractor.config.constants import BID_DATE_CONTEXT_REGEX, DATE_TOKEN_REGEX, MONTHS

_US_DATE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")
_ISO_DATE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")
_NAMED_DATE = re.compile(r"([A-Za-z]+)\.?\s+(\d{1,2}),?\s*(\d{4})")


def parse_bid_date(text: str) -> Optional[date]:
    """
    Parse a bid date string.

    Returns:
        datetime.date, or None for empty, non-string or unparseable input.
    """
    if not text or not isinstance(text, str):
        return None

    match = _US_DATE.search(text)
    if match:
        return _safe_date(int(match.group(3)), int(match.group(1)), int(match.group(2)))

    match = _ISO_DATE.search(text)
    if match:
        return _safe_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    for match in _NAMED_DATE.finditer(text):
        month = MONTHS.get(match.group(1).lower())
        if month is not None:
            return _safe_date(int(match.group(3)), month, int(match.group(2)))

    return None


def detect_bid_date(text: str) -> str:
    """
    Find the first parseable date on a line that mentions a bid deadline.

    Returns:
        The date text as written in the email, or "".
    """
    if not text or not isinstance(text, str):
        return ""

    for line in text.split("\n"):
        if not BID_DATE_CONTEXT_REGEX.search(line):
            continue
        for token in DATE_TOKEN_REGEX.finditer(line):
            if parse_bid_date(token.group(0)) is not None:
                return token.group(0).strip()

    return ""


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None
