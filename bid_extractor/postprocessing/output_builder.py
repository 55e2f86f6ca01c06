"""
Output Normalization — ParsedEmail → bid extraction record.

Maps the parser's structured output onto the flat record consumed by the
popup, the storage layer and the filing helpers (summary text, folder name).
"""
import re
from datetime import datetime, timezone
from typing import List, Optional

from bid_extractor.models.parsed_email import ParsedEmail
from bid_extractor.postprocessing.bid_date import detect_bid_date
from bid_extractor.postprocessing.field_fallbacks import (
    extract_gc_name,
    extract_phone,
    extract_project_name,
)

_UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')
_WHITESPACE = re.compile(r"\s+")


def build_bid_record(
    parsed: ParsedEmail,
    subject: str = "",
    sender_name: str = "",
    sender_email: str = "",
    message_id: str = "",
    attachments: Optional[List[dict]] = None,
    bid_date: str = "",
    extracted_at: Optional[datetime] = None,
) -> dict:
    """
    Build the bid record for one parsed email.

    Field fallbacks:
        project          ← sections block, else subject / body heuristics
        gc               ← signature.company, else body / sender heuristics
        projectManager   ← metadata.projectManager, else signature.name
        email            ← signature, else the sender address
        phone            ← signature, else first phone number in the body
        generalNotes     ← notes section, else the full message text
        bondRequirements ← sections block, else metadata lines
        bidDate          ← caller value, else first deadline date in the notes
        threadMessages   ← only when the thread has more than one message

    Returns:
        Record dict conforming to BID_RECORD_SCHEMA (without "priority").
    """
    data = parsed.to_dict()
    signature = data["signature"]
    sections = data["sections"]
    metadata = data["metadata"]
    thread = data["thread"]

    body_text = "\n".join(message["body"] for message in thread) or sections["generalNotes"]
    timestamp = extracted_at or datetime.now(timezone.utc)

    return {
        "messageId": message_id or "",
        "project": sections["project"] or extract_project_name(subject, body_text),
        "gc": signature["company"] or extract_gc_name(sender_name, body_text),
        "bidDate": bid_date or detect_bid_date(body_text),
        "bidTime": metadata["bidTime"],
        "location": sections["location"],
        "scope": sections["scope"],
        "contact": sender_name or signature["name"],
        "email": signature["email"] or sender_email or "",
        "phone": signature["phone"] or extract_phone(body_text),
        "projectManager": metadata["projectManager"] or signature["name"],
        "submissionInstructions": sections["submissionInstructions"],
        "preBidMeeting": metadata["preBidMeeting"],
        "addenda": metadata["addenda"],
        "bondRequirements": sections["bondRequirements"] or metadata["bondRequirements"],
        "generalNotes": sections["generalNotes"] or body_text,
        "threadMessages": thread if len(thread) > 1 else [],
        "attachments": list(attachments or []),
        "rawSubject": subject or "",
        "extractedAt": timestamp.isoformat(),
    }


def create_summary_text(record: dict) -> str:
    """Human-readable summary written next to downloaded bid documents."""
    attachments = record.get("attachments") or []
    attachment_lines = "\n".join(f"- {a.get('name', '')}" for a in attachments) or "None"
    addenda = record.get("addenda") or []
    addenda_lines = "\n".join(f"- {a}" for a in addenda) or "None"

    meeting = record.get("preBidMeeting") or {}
    meeting_text = "N/A"
    if meeting.get("date") or meeting.get("location"):
        meeting_text = " @ ".join(v for v in (meeting.get("date"), meeting.get("location")) if v)
        if meeting.get("mandatory"):
            meeting_text += " (MANDATORY)"

    priority = record.get("priority") or {}
    priority_text = (
        f"{priority['label']} ({priority['score']:g})" if priority else "N/A"
    )

    return (
        "BID INFORMATION\n"
        "================\n"
        f"Extracted: {record.get('extractedAt') or 'N/A'}\n"
        f"Priority: {priority_text}\n"
        "\n"
        f"Project: {record.get('project') or 'N/A'}\n"
        f"General Contractor: {record.get('gc') or 'N/A'}\n"
        f"Bid Date: {record.get('bidDate') or 'N/A'}\n"
        f"Bid Time: {record.get('bidTime') or 'N/A'}\n"
        f"Location: {record.get('location') or 'N/A'}\n"
        f"Scope: {record.get('scope') or 'N/A'}\n"
        f"Pre-Bid Meeting: {meeting_text}\n"
        f"Bond Requirements: {record.get('bondRequirements') or 'N/A'}\n"
        "\n"
        f"Contact: {record.get('contact') or 'N/A'}\n"
        f"Project Manager: {record.get('projectManager') or 'N/A'}\n"
        f"Email: {record.get('email') or 'N/A'}\n"
        f"Phone: {record.get('phone') or 'N/A'}\n"
        "\n"
        "Addenda:\n"
        f"{addenda_lines}\n"
        "\n"
        "Attachments:\n"
        f"{attachment_lines}\n"
        "\n"
        f"Original Subject: {record.get('rawSubject') or 'N/A'}\n"
    )


def sanitize_file_name(name: str, max_length: int = 50) -> str:
    """Strip filesystem-unsafe characters and collapse whitespace to "_"."""
    if not name:
        return ""
    cleaned = _UNSAFE_FILENAME_CHARS.sub("", name)
    return _WHITESPACE.sub("_", cleaned)[:max_length]


def create_folder_name(pattern: str, record: dict) -> str:
    """
    Fill a folder pattern such as "Bids/{gc}_{date}_{project}".

    Placeholders: {project}, {date}, {gc}, {location}.
    """
    bid_date = sanitize_file_name((record.get("bidDate") or "").replace("/", "-")) or "unknown-date"
    return (
        pattern
        .replace("{project}", sanitize_file_name(record.get("project") or "Unknown Project"))
        .replace("{date}", bid_date)
        .replace("{gc}", sanitize_file_name(record.get("gc") or "Unknown GC"))
        .replace("{location}", sanitize_file_name(record.get("location") or "Unknown Location"))
    )
