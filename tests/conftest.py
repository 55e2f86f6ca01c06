"""
Shared test fixtures for the bid extractor test suite.
"""
from datetime import datetime, timezone

import pytest


# ==========================================================================
# Email bodies
# ==========================================================================

@pytest.fixture
def turner_signature_email():
    return (
        "Please submit your bid by Friday.\n"
        "\n"
        "Best regards,\n"
        "John Smith\n"
        "Senior Project Manager\n"
        "Turner Construction Company\n"
        "jsmith@turner.com\n"
        "(555) 123-4567"
    )


@pytest.fixture
def structured_bid_email():
    return (
        "Dear Subcontractor,\n"
        "\n"
        "You are invited to bid on the following project.\n"
        "\n"
        "Project Name: Riverside Medical Center Expansion\n"
        "Location: 4500 River Rd, Austin, TX\n"
        "\n"
        "Scope of Work:\n"
        "Structural steel, miscellaneous metals and metal decking.\n"
        "Includes embeds and lintels.\n"
        "\n"
        "Pre-Bid Meeting:\n"
        "Date: February 18, 2026 at 10:00 AM\n"
        "Location: Project Site - 1234 Main St\n"
        "Attendance is mandatory for all bidders.\n"
        "\n"
        "Submission Instructions:\n"
        "Bids are due by 2:00 PM CST on February 25, 2026.\n"
        "Upload proposals to BuildingConnected.\n"
        "\n"
        "Bond Requirements:\n"
        "A 5% bid bond is required.\n"
        "Performance and payment bond required for contracts over $100,000.\n"
        "\n"
        "Addenda:\n"
        "Addendum No. 1 has been issued.\n"
        "\n"
        "Project Manager: Sarah Connor\n"
        "\n"
        "Best regards,\n"
        "John Smith\n"
        "Senior Project Manager\n"
        "Turner Construction Company\n"
        "jsmith@turner.com\n"
        "(555) 123-4567"
    )


@pytest.fixture
def reply_thread_email():
    return (
        "Adding the revised drawings, see below.\n"
        "\n"
        "On Mon, Feb 10, 2026 at 3:15 PM Jane Doe <jane@turner.com> wrote:\n"
        "> Can you confirm the steel tonnage?\n"
        "> We need it by Wednesday.\n"
        "\n"
        "On Fri, Feb 7, 2026 at 9:00 AM Bob Builder <bob@walshgroup.com> wrote:\n"
        "> Initial invitation to bid attached.\n"
    )


@pytest.fixture
def forwarded_email():
    return (
        "FYI - see the invitation below.\n"
        "\n"
        "---------- Forwarded message ---------\n"
        "From: Jane Doe <jane@turner.com>\n"
        "Date: Mon, Feb 10, 2026 at 3:15 PM\n"
        "Subject: ITB - Riverside Medical Center\n"
        "To: estimating@steelco.com\n"
        "\n"
        "Please find the bid documents attached.\n"
    )


@pytest.fixture
def outlook_thread_email():
    return (
        "Thanks for the quick turnaround.\n"
        "\n"
        "From: Mike Johnson <mjohnson@henselphelps.com>\n"
        "Sent: Tuesday, February 10, 2026 4:02 PM\n"
        "To: Estimating\n"
        "Subject: RE: Bid Package 05\n"
        "\n"
        "Revised scope attached.\n"
    )


# ==========================================================================
# Records
# ==========================================================================

@pytest.fixture
def fixed_now():
    return datetime(2026, 2, 11, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_record():
    return {
        "messageId": "msg-001@turner.com",
        "project": "Riverside Medical Center Expansion",
        "gc": "Turner Construction Company",
        "bidDate": "February 25, 2026",
        "bidTime": "2:00 PM CST",
        "location": "4500 River Rd, Austin, TX",
        "scope": "Structural steel, miscellaneous metals and metal decking.",
        "contact": "John Smith",
        "email": "jsmith@turner.com",
        "phone": "(555) 123-4567",
        "projectManager": "Sarah Connor",
        "submissionInstructions": "Upload proposals to BuildingConnected.",
        "preBidMeeting": {
            "date": "February 18, 2026 at 10:00 AM",
            "location": "Project Site - 1234 Main St",
            "mandatory": True,
        },
        "addenda": ["Addendum No. 1 has been issued."],
        "bondRequirements": "A 5% bid bond is required.",
        "generalNotes": "You are invited to bid on the following project.",
        "threadMessages": [],
        "attachments": [{"name": "Drawings.pdf", "url": "", "type": "drawing"}],
        "rawSubject": "ITB - Riverside Medical Center",
        "extractedAt": "2026-02-11T15:00:00+00:00",
    }
