"""
Unit tests for the email structure parser orchestrator.

Covers:
- Merged output of the four sub-parsers
- Totality on malformed input
- Determinism / idempotence
- Thread reconstruction and signature/section disjointness
"""
import pytest

from bid_extractor.email_parser.pipeline import parse_full_email
from bid_extractor.email_parser.metadata import extract_metadata
from bid_extractor.email_parser.sections import identify_sections
from bid_extractor.email_parser.signature import extract_signature
from bid_extractor.email_parser.thread import extract_thread_messages
from bid_extractor.models.parsed_email import ParsedEmail


class TestParseFullEmail:

    def test_structured_email(self, structured_bid_email):
        parsed = parse_full_email(structured_bid_email)

        assert parsed.signature.name == "John Smith"
        assert parsed.signature.company == "Turner Construction Company"
        assert parsed.sections.project == "Riverside Medical Center Expansion"
        assert "February 18" in parsed.sections.pre_bid_meeting
        assert parsed.metadata.pre_bid_meeting.mandatory is True
        assert parsed.metadata.bid_time == "2:00 PM CST"
        assert len(parsed.thread) == 1
        assert parsed.thread[0].sender == ""

    def test_matches_individual_sub_parsers(self, reply_thread_email):
        parsed = parse_full_email(reply_thread_email)
        assert parsed.signature == extract_signature(reply_thread_email)
        assert parsed.sections == identify_sections(reply_thread_email)
        assert list(parsed.thread) == extract_thread_messages(reply_thread_email)
        assert parsed.metadata == extract_metadata(reply_thread_email)

    @pytest.mark.parametrize("bad_input", ["", None, 0, ["a"], {"body": "x"}])
    def test_invalid_input_yields_empty_record(self, bad_input):
        assert parse_full_email(bad_input) == ParsedEmail()

    def test_empty_record_shape(self):
        data = parse_full_email(None).to_dict()
        assert data["signature"] == {"name": "", "title": "", "company": "", "email": "", "phone": ""}
        assert data["thread"] == []
        assert data["metadata"]["preBidMeeting"] == {"date": "", "location": "", "mandatory": False}
        assert all(value == "" for value in data["sections"].values())

    def test_idempotent(self, structured_bid_email, forwarded_email):
        for body in (structured_bid_email, forwarded_email):
            assert parse_full_email(body) == parse_full_email(body)
            assert parse_full_email(body).to_dict() == parse_full_email(body).to_dict()

    def test_whitespace_only_body(self):
        parsed = parse_full_email("   \n\n  ")
        assert parsed.thread == ()
        assert parsed.sections.general_notes == ""


class TestThreadReconstruction:

    def test_bodies_appear_in_order(self, reply_thread_email):
        messages = parse_full_email(reply_thread_email).thread
        position = 0
        for message in messages:
            first_line = message.body.split("\n")[0]
            found = reply_thread_email.find(first_line, position)
            assert found >= position
            position = found + len(first_line)

    def test_three_reply_headers(self):
        text = (
            "On Mon, Feb 10, 2026 at 3:15 PM Jane Doe <jane@turner.com> wrote:\n"
            "> Latest numbers attached.\n"
            "On Sun, Feb 9, 2026 at 1:00 PM Al Green <al@example.com> wrote:\n"
            "> Any update?\n"
            "On Sat, Feb 8, 2026 at 8:30 AM Bob Builder <bob@walshgroup.com> wrote:\n"
            "> Invitation to bid.\n"
        )
        messages = parse_full_email(text).thread
        assert len(messages) == 3
        assert "Jane Doe" in messages[0].sender
        assert messages[1].sender == "Al Green"
        assert messages[2].body == "Invitation to bid."


class TestSignatureSectionDisjointness:

    def test_signature_text_not_in_sections(self, structured_bid_email):
        parsed = parse_full_email(structured_bid_email)
        for value in parsed.sections.to_dict().values():
            assert parsed.signature.email not in value
            assert parsed.signature.title not in value


_LARGE_STRUCTURED = "Scope of Work:\n" + "Structural steel and misc metals line\n" * 80_000
_HARD_INPUTS = {
    "multi_megabyte_single_line": "word " * 600_000,
    "multi_megabyte_structured": _LARGE_STRUCTURED,
    "unterminated_reply_header": "On " + "x " * 200_000 + "<a@b.co" + ">" * 1000 + "(" * 1000,
    "digit_then_dots": "1" + "." * 2_000_000,
    "long_token_in_signature": "Regards,\n" + "a" * 200_000,
    "stray_quote_markers": "> > >\n>>>\n>\n> On wrote:\n>",
    "unterminated_brackets": "On Mon <jane@turner.com wrote:\nFrom: (\nSent: [\nPre-Bid Meeting: (",
    "bare_separators": "--\n---------- Forwarded message ---------\n--",
    "crlf_only": "\r\n" * 1000,
}


class TestTotality:
    """parse_full_email returns a complete record for any string."""

    @pytest.mark.parametrize("text", list(_HARD_INPUTS.values()), ids=list(_HARD_INPUTS))
    def test_hard_inputs_yield_complete_record(self, text):
        data = parse_full_email(text).to_dict()

        assert set(data) == {"signature", "sections", "thread", "metadata"}
        assert set(data["signature"]) == {"name", "title", "company", "email", "phone"}
        assert set(data["sections"]) == {
            "project", "location", "scope", "submissionInstructions",
            "preBidMeeting", "bondRequirements", "addenda", "generalNotes",
        }
        assert set(data["metadata"]) == {
            "bidTime", "projectManager", "preBidMeeting", "addenda", "bondRequirements",
        }
        assert set(data["metadata"]["preBidMeeting"]) == {"date", "location", "mandatory"}
        for message in data["thread"]:
            assert set(message) == {"sender", "date", "body"}
        assert all(isinstance(v, str) for v in data["signature"].values())
        assert all(isinstance(v, str) for v in data["sections"].values())
