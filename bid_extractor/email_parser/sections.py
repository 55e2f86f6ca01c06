"""
Section Identifier — splits an email body into labeled fields and blocks.

Steps:
    1. Drop the closing block (same delimiters as the signature extractor)
    2. Drop a leading greeting line
    3. Single-line fields (project, location)
    4. Multi-line sections bounded by top-level headers or a double blank line
    5. "X includes:" bullet-list fallback for scope
    6. generalNotes = cleaned body, always
"""
import logging
from typing import List, Pattern

from bid_extractor.config.constants import (
    BULLET_REGEX,
    FIELD_PATTERNS,
    GREETING_REGEX,
    INCLUDES_REGEX,
    SECTION_HEADERS,
    SIGNATURE_DELIMITERS,
    TOP_LEVEL_HEADER_REGEX,
)
from bid_extractor.email_parser.boundary import find_earliest_boundary
from bid_extractor.models.sections import SectionSet

logger = logging.getLogger(__name__)


def identify_sections(text: str) -> SectionSet:
    """
    Identify structured sections within an email body.

    Args:
        text: Full email body text.

    Returns:
        SectionSet. general_notes holds the greeting- and signature-stripped
        body whether or not any structured field was found.
    """
    if not text or not isinstance(text, str):
        return SectionSet()

    body = remove_closing(text)
    body_no_greeting = remove_greeting(body)

    fields = {}
    for key, pattern in FIELD_PATTERNS.items():
        match = pattern.search(body)
        fields[key] = match.group(1).strip() if match else ""

    blocks = {}
    for key, header in SECTION_HEADERS.items():
        blocks[key] = extract_multiline_section(body, header)

    if not blocks["scope"]:
        blocks["scope"] = _extract_includes_scope(body)

    found = [key for key, value in {**fields, **blocks}.items() if value]
    logger.debug("Sections found: %s", found or "none")

    return SectionSet(
        project=fields["project"],
        location=fields["location"],
        scope=blocks["scope"],
        submission_instructions=blocks["submission_instructions"],
        pre_bid_meeting=blocks["pre_bid_meeting"],
        bond_requirements=blocks["bond_requirements"],
        addenda=blocks["addenda"],
        general_notes=body_no_greeting.strip(),
    )


def remove_closing(text: str) -> str:
    """Drop everything from the earliest closing delimiter onward."""
    delimiter = find_earliest_boundary(text, SIGNATURE_DELIMITERS)
    end = delimiter.start if delimiter is not None else len(text)
    return text[:end].strip()


def remove_greeting(text: str) -> str:
    """Drop a leading "Dear X," / "Hi Team," line and the blank lines after it."""
    lines = text.split("\n")
    start = 0

    while start < len(lines) and not lines[start].strip():
        start += 1

    if start < len(lines) and GREETING_REGEX.search(lines[start].strip()):
        start += 1
        while start < len(lines) and not lines[start].strip():
            start += 1

    return "\n".join(lines[start:]).strip()


def collect_section_lines(rest: str, keep_raw: bool = True) -> List[str]:
    """
    Collect the lines of a section whose header ends right before *rest*.

    Collection stops at a top-level header (never at sub-field labels such
    as "Date:") or at the second consecutive blank line.

    Args:
        rest: Text following the header match.
        keep_raw: Keep original indentation; False stores trimmed lines.
    """
    collected: List[str] = []
    blank_count = 0

    for line in rest.split("\n"):
        trimmed = line.strip()

        if collected and TOP_LEVEL_HEADER_REGEX.match(trimmed):
            break

        if not trimmed:
            blank_count += 1
            if blank_count >= 2:
                break
        else:
            blank_count = 0

        collected.append(line if keep_raw else trimmed)

    return collected


def extract_multiline_section(text: str, header: Pattern) -> str:
    """Text of the section introduced by *header*, or "" if absent."""
    match = header.search(text)
    if not match:
        return ""
    return "\n".join(collect_section_lines(text[match.end():])).strip()


def _extract_includes_scope(text: str) -> str:
    """Bullet lines following an "... includes:" line."""
    match = INCLUDES_REGEX.search(text)
    if not match:
        return ""

    bullets: List[str] = []
    for line in text[match.end():].split("\n"):
        trimmed = line.strip()
        if not trimmed:
            if bullets:
                break
            continue
        if BULLET_REGEX.match(trimmed):
            bullets.append(trimmed)
        elif bullets:
            break

    return "\n".join(bullets).strip()
