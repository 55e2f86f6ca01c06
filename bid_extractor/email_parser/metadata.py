"""
Metadata Extractor — bid fields that may appear anywhere in the body.

Extracts bid submission time, project manager, the pre-bid meeting tuple,
addenda references and bond requirement text, independently of section
boundaries.
"""
import logging
from typing import List

from bid_extractor.config.constants import (
    ADDENDUM_REGEX,
    BID_TIME_CONTEXT_REGEX,
    BID_TIME_REGEX,
    BOND_REGEX,
    MANDATORY_REGEX,
    MEETING_DATE_REGEX,
    MEETING_LOCATION_REGEX,
    PRE_BID_HEADER_REGEX,
    PROJECT_MANAGER_REGEX,
)
from bid_extractor.email_parser.sections import collect_section_lines
from bid_extractor.models.metadata import Metadata, PreBidMeeting

logger = logging.getLogger(__name__)


def extract_metadata(text: str) -> Metadata:
    """
    Extract cross-cutting bid metadata from an email body.

    Args:
        text: Full email body text.

    Returns:
        Metadata with empty/False/() defaults for anything not found.
    """
    if not text or not isinstance(text, str):
        return Metadata()

    return Metadata(
        bid_time=_extract_bid_time(text),
        project_manager=_extract_project_manager(text),
        pre_bid_meeting=_extract_pre_bid_meeting(text),
        addenda=tuple(_extract_addenda(text)),
        bond_requirements=_extract_bond_requirements(text),
    )


def _extract_bid_time(text: str) -> str:
    """First time-of-day on a line that also carries a deadline keyword."""
    for line in text.split("\n"):
        if not BID_TIME_CONTEXT_REGEX.search(line):
            continue
        match = BID_TIME_REGEX.search(line)
        if match:
            return match.group(0).strip()
    return ""


def _extract_project_manager(text: str) -> str:
    match = PROJECT_MANAGER_REGEX.search(text)
    return match.group(1).strip() if match else ""


def _extract_pre_bid_meeting(text: str) -> PreBidMeeting:
    header = PRE_BID_HEADER_REGEX.search(text)
    if not header:
        return PreBidMeeting()

    section = "\n".join(collect_section_lines(text[header.end():], keep_raw=False))

    date = MEETING_DATE_REGEX.search(section)
    location = MEETING_LOCATION_REGEX.search(section)

    return PreBidMeeting(
        date=date.group(1).strip() if date else "",
        location=location.group(1).strip() if location else "",
        mandatory=bool(MANDATORY_REGEX.search(section)),
    )


def _extract_addenda(text: str) -> List[str]:
    """One entry per line mentioning an addendum, deduplicated in first-seen order."""
    seen = set()
    addenda: List[str] = []

    for line in text.split("\n"):
        if not ADDENDUM_REGEX.search(line):
            continue
        entry = line.strip()
        if entry not in seen:
            seen.add(entry)
            addenda.append(entry)

    return addenda


def _extract_bond_requirements(text: str) -> str:
    bond_lines = [line.strip() for line in text.split("\n") if BOND_REGEX.search(line)]
    return "\n".join(bond_lines).strip()
