"""
Thread Splitter — decomposes a reply/forward thread into ordered messages.

Boundary kinds:
    1. Reply header          "On <date> <name> wrote:"
    2. Forward separator     "---------- Forwarded message ---------"
    3. Outlook header pair   "From: ..." followed by "Sent:"/"Date:"

An Outlook pair that sits just after a forward separator is the forward's own
header block and is not counted as a second boundary.
"""
import logging
from typing import List, Tuple

from bid_extractor.config.constants import (
    FORWARD_HEADER_WINDOW,
    FORWARD_SEPARATOR_REGEX,
    FORWARDED_DATE_REGEX,
    FORWARDED_FROM_REGEX,
    FORWARDED_SUBJECT_REGEX,
    OUTLOOK_HEADER_REGEX,
    QUOTE_MARKER_REGEX,
    REPLY_DATE_END_REGEX,
    REPLY_HEADER_REGEX,
)
from bid_extractor.email_parser.boundary import iter_boundaries
from bid_extractor.models.thread_message import ThreadBoundary, ThreadMessage

logger = logging.getLogger(__name__)


def extract_thread_messages(text: str) -> List[ThreadMessage]:
    """
    Split an email body into thread messages, newest first.

    Args:
        text: Full email body text (may contain a quoted thread).

    Returns:
        [] for empty/whitespace-only/non-string input; a single message with
        empty sender/date when no boundary is found.
    """
    if not text or not isinstance(text, str) or not text.strip():
        return []

    boundaries = find_thread_boundaries(text)

    if not boundaries:
        return [ThreadMessage(sender="", date="", body=text.strip())]

    boundaries.sort(key=lambda b: b.offset)
    messages: List[ThreadMessage] = []

    first_body = text[: boundaries[0].offset].strip()
    if first_body:
        messages.append(ThreadMessage(sender="", date="", body=first_body))

    for i, boundary in enumerate(boundaries):
        body_end = boundaries[i + 1].offset if i + 1 < len(boundaries) else len(text)
        body = text[boundary.header_end:body_end].strip()
        sender, date = boundary.sender, boundary.date

        if boundary.is_forward:
            sender, date, body = _parse_forwarded_header(body)

        messages.append(
            ThreadMessage(sender=sender, date=date, body=strip_quote_markers(body).strip())
        )

    logger.debug("Thread split into %d messages (%r)", len(messages), boundaries)
    return messages


def find_thread_boundaries(text: str) -> List[ThreadBoundary]:
    """Collect reply, forward and Outlook boundaries (unsorted)."""
    boundaries: List[ThreadBoundary] = []

    for match in iter_boundaries(text, REPLY_HEADER_REGEX):
        sender, date = parse_reply_header(match.group(2))
        boundaries.append(
            ThreadBoundary(
                offset=match.start(),
                header_end=match.end(),
                sender=sender,
                date=date,
            )
        )

    forwards: List[ThreadBoundary] = [
        ThreadBoundary(offset=match.start(), header_end=match.end(), is_forward=True)
        for match in iter_boundaries(text, FORWARD_SEPARATOR_REGEX)
    ]
    boundaries.extend(forwards)

    for match in iter_boundaries(text, OUTLOOK_HEADER_REGEX):
        start = match.start()
        inside_forward = any(
            fwd.offset < start <= fwd.header_end + FORWARD_HEADER_WINDOW
            for fwd in forwards
        )
        if inside_forward:
            continue
        boundaries.append(
            ThreadBoundary(
                offset=start,
                header_end=match.end(),
                sender=match.group(1).strip(),
                date=match.group(2).strip(),
            )
        )

    return boundaries


def parse_reply_header(inner: str) -> Tuple[str, str]:
    """
    Split the text between "On" and "wrote:" into (sender, date).

    "Mon, Feb 10, 2026 at 3:15 PM Jane Doe <jane@x.com>" -> ("Jane Doe", "Mon, Feb 10, 2026 at 3:15 PM")
    "Feb 9, 2026, Bob Jones"                             -> ("Bob Jones", "Feb 9, 2026")
    """
    inner = inner.strip()

    bracket = inner.rfind("<")
    if bracket > 0 and inner.endswith(">"):
        prefix = inner[:bracket].strip()
        date_tokens = list(REPLY_DATE_END_REGEX.finditer(prefix))
        if date_tokens:
            split_at = date_tokens[-1].end()
            name = prefix[split_at:].strip(" ,")
            if name:
                return name, prefix[:split_at].rstrip(" ,")
        return prefix.rstrip(" ,"), ""

    parts = inner.split()
    if len(parts) >= 3:
        sender = " ".join(parts[-2:])
        date = " ".join(parts[:-2]).rstrip(" ,")
        return sender, date

    return inner, ""


def _parse_forwarded_header(text: str) -> Tuple[str, str, str]:
    """
    Parse From/Date/Subject lines at the start of a forwarded block.

    Returns:
        (sender, date, remaining body)
    """
    lines = text.split("\n")
    sender = ""
    date = ""
    body_start = 0

    for i, raw in enumerate(lines):
        line = raw.strip()

        from_match = FORWARDED_FROM_REGEX.match(line)
        if from_match:
            sender = from_match.group(1).strip()
            body_start = i + 1
            continue

        date_match = FORWARDED_DATE_REGEX.match(line)
        if date_match:
            date = date_match.group(1).strip()
            body_start = i + 1
            continue

        if FORWARDED_SUBJECT_REGEX.match(line):
            body_start = i + 1
            continue

        if sender or date:
            if line:
                body_start = i
                break
            body_start = i + 1

    return sender, date, "\n".join(lines[body_start:]).strip()


def strip_quote_markers(text: str) -> str:
    """Remove one level of ">" / "> " quoting from every line."""
    return "\n".join(QUOTE_MARKER_REGEX.sub("", line, count=1) for line in text.split("\n"))
