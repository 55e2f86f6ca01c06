"""
Constants used across the parser and post-processing layers.
Versioned and pinned for determinism.

Every pattern table is compiled once at import time and never mutated.
"""
import re
from typing import Dict, List, Pattern

PARSER_VERSION: str = "bid-email-parser-1.5.0"

# =============================================================================
# Signature / closing delimiters (order decides ties at the same offset)
# =============================================================================
SIGNATURE_DELIMITERS: List[Pattern] = [
    re.compile(r"^--\s*$", re.MULTILINE),
    re.compile(r"^Best regards,?\s*$", re.MULTILINE | re.IGNORECASE),
    re.compile(r"^Kind regards,?\s*$", re.MULTILINE | re.IGNORECASE),
    re.compile(r"^Regards,?\s*$", re.MULTILINE | re.IGNORECASE),
    re.compile(r"^Sincerely,?\s*$", re.MULTILINE | re.IGNORECASE),
    re.compile(r"^Thanks,?\s*$", re.MULTILINE | re.IGNORECASE),
    re.compile(r"^Thank you,?\s*$", re.MULTILINE | re.IGNORECASE),
    re.compile(r"^Cheers,?\s*$", re.MULTILINE | re.IGNORECASE),
    re.compile(r"^Respectfully,?\s*$", re.MULTILINE | re.IGNORECASE),
]

# =============================================================================
# Contact details
# =============================================================================
# lookbehind keeps the scan linear on long unbroken tokens
EMAIL_REGEX: Pattern = re.compile(r"(?<![\w.+-])[\w.+-]+@[\w.-]+\.\w{2,}")
PHONE_REGEX: Pattern = re.compile(r"[(+]?\d[\d.\-() ]{6,}\d")

_PHONE_LABELS = r"(?:Telephone|Tel|Phone|Ph|Direct|Office|Cell|Mobile|Fax|O|C|M|F)\b"
PHONE_LABEL_REGEX: Pattern = re.compile(r"^" + _PHONE_LABELS + r"\s*[:.]?\s*", re.IGNORECASE)
PHONE_LINE_REGEX: Pattern = re.compile(r"^" + _PHONE_LABELS + r"\s*[:.]?\s*[\d(+]", re.IGNORECASE)
BARE_PHONE_LINE_REGEX: Pattern = re.compile(r"^[\d(+][\d.\-() ]+$")

# =============================================================================
# Greeting & sections
# =============================================================================
GREETING_REGEX: Pattern = re.compile(
    r"^(?:Dear\s+.+|Hi\s+.+|Hello\s+.+|Good\s+(?:morning|afternoon|evening).*)[\s,]*$",
    re.IGNORECASE,
)

FIELD_PATTERNS: Dict[str, Pattern] = {
    "project": re.compile(r"^(?:Project\s*Name|Job\s*Name)\s*:\s*(.+)", re.MULTILINE | re.IGNORECASE),
    "location": re.compile(r"^(?:Location|Site\s*Address)\s*:\s*(.+)", re.MULTILINE | re.IGNORECASE),
}

SECTION_HEADERS: Dict[str, Pattern] = {
    "scope": re.compile(r"^Scope\s+of\s+Work\s*:", re.MULTILINE | re.IGNORECASE),
    "submission_instructions": re.compile(r"^Submission\s+Instructions?\s*:", re.MULTILINE | re.IGNORECASE),
    "pre_bid_meeting": re.compile(r"^Pre[- ]?Bid\s+Meeting\s*:", re.MULTILINE | re.IGNORECASE),
    "bond_requirements": re.compile(r"^Bond\s+Requirements?\s*:", re.MULTILINE | re.IGNORECASE),
    "addenda": re.compile(r"^Addenda\s*:", re.MULTILINE | re.IGNORECASE),
}

# Only these labels end a multi-line section; sub-field labels such as
# "Date:" or "Location:" inside a block do not.
TOP_LEVEL_HEADER_REGEX: Pattern = re.compile(
    r"^(?:Scope\s+of\s+Work|Submission\s+Instructions?|Pre[- ]?Bid\s+Meeting"
    r"|Bond\s+Requirements?|Addenda|Project\s*Name|Job\s*Name|Bid\s+Date)\s*:",
    re.IGNORECASE,
)

INCLUDES_REGEX: Pattern = re.compile(r"includes\s*:[ \t]*\r?$", re.MULTILINE | re.IGNORECASE)
BULLET_REGEX: Pattern = re.compile(r"^[-*]")

# =============================================================================
# Thread boundaries
# =============================================================================
REPLY_HEADER_REGEX: Pattern = re.compile(r"^(On[ \t]+(.+?)[ \t]+wrote:)[ \t]*\r?$", re.MULTILINE)
FORWARD_SEPARATOR_REGEX: Pattern = re.compile(
    r"^-{5,}\s*Forwarded message\s*-{5,}[ \t]*\r?$", re.MULTILINE | re.IGNORECASE
)
OUTLOOK_HEADER_REGEX: Pattern = re.compile(
    r"^From:[ \t]+(.+)\r?\n(?:Sent|Date):[ \t]+(.+)", re.MULTILINE
)
FORWARDED_FROM_REGEX: Pattern = re.compile(r"^From:\s+(.+)", re.IGNORECASE)
FORWARDED_DATE_REGEX: Pattern = re.compile(r"^Date:\s+(.+)", re.IGNORECASE)
FORWARDED_SUBJECT_REGEX: Pattern = re.compile(r"^Subject:\s+(.+)", re.IGNORECASE)
QUOTE_MARKER_REGEX: Pattern = re.compile(r"^>[ ]?")

# Heuristic tuned on sample threads: an Outlook From/Date pair starting
# within this many characters after a forward separator belongs to it.
FORWARD_HEADER_WINDOW: int = 50

# End of the date portion of a "On <date> Name <email> wrote:" header.
REPLY_DATE_END_REGEX: Pattern = re.compile(
    r"\d{1,2}:\d{2}(?:\s*[AaPp]\.?[Mm]\.?)?|\b\d{4}\b"
)

# =============================================================================
# Metadata
# =============================================================================
BID_TIME_REGEX: Pattern = re.compile(r"\b\d{1,2}:\d{2}\s*(?i:AM|PM)\b(?:\s*[A-Z]{2,4}\b)?")
BID_TIME_CONTEXT_REGEX: Pattern = re.compile(
    r"\b(?:by|before|no\s+later\s+than|due|deadline)\b", re.IGNORECASE
)
PROJECT_MANAGER_REGEX: Pattern = re.compile(
    r"^(?i:Project\s+Manager|PM|Point\s+of\s+Contact|POC|Contact)\s*:\s*"
    r"([A-Z][a-zA-Z]+(?:[ \t]+[A-Z][a-zA-Z]+)+)",
    re.MULTILINE,
)
PRE_BID_HEADER_REGEX: Pattern = re.compile(r"Pre[- ]?Bid\s+Meeting\s*:", re.IGNORECASE)
MEETING_DATE_REGEX: Pattern = re.compile(r"^Date\s*:\s*(.+)", re.MULTILINE | re.IGNORECASE)
MEETING_LOCATION_REGEX: Pattern = re.compile(r"^Location\s*:\s*(.+)", re.MULTILINE | re.IGNORECASE)
MANDATORY_REGEX: Pattern = re.compile(r"\b(?:mandatory|required|must\s+attend)\b", re.IGNORECASE)
ADDENDUM_REGEX: Pattern = re.compile(r"\bAddendum\s+(?:No\.?\s*|#\s*)?\d+", re.IGNORECASE)
BOND_REGEX: Pattern = re.compile(
    r"\b(?:bid\s+bond|performance\s+(?:and\s+payment\s+)?bond|payment\s+bond|surety\s+bond)\b",
    re.IGNORECASE,
)

# =============================================================================
# Record field fallbacks (subject / sender / body heuristics)
# =============================================================================
SUBJECT_PROJECT_PATTERNS: List[Pattern] = [
    re.compile(r"\b(?:RFQ|RFP|ITB|Bid|Quote|Proposal)\b[:\s-]*(.+?)(?:\s+-|\s*\||$)", re.IGNORECASE),
    re.compile(r"\bProject\b[:\s]+(.+?)(?:\s+-|\s*\||$)", re.IGNORECASE),
    re.compile(r"^(?:(?:RE|FWD?):\s*)?(.+?)\s*-\s*(?:RFQ|Bid|Steel)\b", re.IGNORECASE),
]
BODY_PROJECT_REGEX: Pattern = re.compile(
    r"^(?:Project|Job)(?:\s+Name)?[ \t]*:[ \t]*(.+)", re.MULTILINE | re.IGNORECASE
)
SUBJECT_PREFIX_REGEX: Pattern = re.compile(r"^(?:(?:RE|FWD?|RFQ|RFP|ITB)\b[:\s]*)+", re.IGNORECASE)

GC_BODY_PATTERNS: List[Pattern] = [
    re.compile(r"^(?:General\s+Contractor|GC|Prime)[ \t]*:[ \t]*(.+)", re.MULTILINE | re.IGNORECASE),
    # "Turner Construction", "Acme Steel Builders": up to five capitalised words
    re.compile(
        r"\b([A-Z][\w&.'-]*(?:[ \t]+[A-Z][\w&.'-]*){0,4}?[ \t]+(?:Construction|Builders|Contracting))\b"
    ),
]
SENDER_COMPANY_REGEX: Pattern = re.compile(r"(?:\bat|@|\bfrom)\s+(.+)", re.IGNORECASE)
FALLBACK_PHONE_REGEX: Pattern = re.compile(r"(?<!\d)(\(?\d{3}\)?[-. ]?\d{3}[-. ]?\d{4})(?!\d)")

# =============================================================================
# Bid date detection (record assembly)
# =============================================================================
BID_DATE_CONTEXT_REGEX: Pattern = re.compile(
    r"\b(?:bids?\s+(?:are\s+)?due|bid\s+date|due\s+date|deadline|due\s+by|due\s+on)\b",
    re.IGNORECASE,
)
DATE_TOKEN_REGEX: Pattern = re.compile(
    r"\b\d{1,2}/\d{1,2}/\d{4}\b"
    r"|\b\d{4}-\d{1,2}-\d{1,2}\b"
    r"|\b[A-Za-z]{3,9}\.?\s+\d{1,2},?\s*\d{4}\b"
)

MONTHS: Dict[str, int] = {
    "january": 1, "february": 2, "march": 3, "april": 4, "may": 5, "june": 6,
    "july": 7, "august": 8, "september": 9, "october": 10, "november": 11, "december": 12,
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "jun": 6, "jul": 7, "aug": 8,
    "sep": 9, "sept": 9, "oct": 10, "nov": 11, "dec": 12,
}

# =============================================================================
# Priority scoring dictionaries
# =============================================================================
MAJOR_GCS: List[str] = [
    "turner", "skanska", "mortenson", "mccarthy", "holder", "whiting-turner",
    "hensel phelps", "beck", "barton malow", "gilbane", "brasfield gorrie",
    "jll", "cbre", "webcor", "swinerton", "hitt", "clark construction",
    "suffolk", "walsh", "austin industries", "ryan companies", "hoar",
]

HIGH_VALUE_KEYWORDS: List[str] = [
    "hospital", "medical center", "data center", "high-rise", "tower",
    "stadium", "arena", "airport", "university", "headquarters", "hq",
    "million", "campus", "research", "lab", "biotech", "pharma",
    "manufacturing", "warehouse", "distribution", "hotel", "resort",
]

PLACEHOLDER_VALUES: List[str] = ["", "N/A", "-", "Unknown", "Unknown GC"]

# =============================================================================
# Storage
# =============================================================================
RECENT_LIMIT: int = 50
