"""
Unit tests for metadata extraction.
"""
from bid_extractor.email_parser.metadata import extract_metadata
from bid_extractor.models.metadata import Metadata, PreBidMeeting


class TestBidTime:

    def test_time_with_timezone(self):
        meta = extract_metadata("Bids are due by 2:00 PM CST on February 25, 2026.")
        assert meta.bid_time == "2:00 PM CST"

    def test_lowercase_meridiem(self):
        assert extract_metadata("Please submit by 5:00 pm.").bid_time == "5:00 pm"

    def test_lowercase_word_is_not_a_timezone(self):
        assert extract_metadata("Proposals due 2:00 PM on Friday").bid_time == "2:00 PM"

    def test_time_without_deadline_keyword_ignored(self):
        assert extract_metadata("The walkthrough starts at 10:00 AM.").bid_time == ""

    def test_keyword_inside_word_ignored(self):
        assert extract_metadata("Residue cleanup at 3:00 PM").bid_time == ""


class TestProjectManager:

    def test_labeled_name(self):
        assert extract_metadata("Project Manager: Sarah Connor").project_manager == "Sarah Connor"

    def test_label_case_insensitive(self):
        assert extract_metadata("project manager: Sarah Connor").project_manager == "Sarah Connor"

    def test_short_labels(self):
        assert extract_metadata("PM: Kyle Reese").project_manager == "Kyle Reese"
        assert extract_metadata("POC: Miles Dyson").project_manager == "Miles Dyson"

    def test_name_must_be_capitalized_words(self):
        assert extract_metadata("Project Manager: sarah connor").project_manager == ""
        assert extract_metadata("Contact: Sarah").project_manager == ""

    def test_label_must_start_line(self):
        assert extract_metadata("Senior Project Manager: Sarah Connor").project_manager == ""


class TestPreBidMeeting:

    def test_full_block(self, structured_bid_email):
        meeting = extract_metadata(structured_bid_email).pre_bid_meeting
        assert meeting == PreBidMeeting(
            date="February 18, 2026 at 10:00 AM",
            location="Project Site - 1234 Main St",
            mandatory=True,
        )

    def test_optional_meeting(self):
        text = "Pre-Bid Meeting:\nDate: March 1, 2026\nLocation: GC Office\nAttendance is optional."
        meeting = extract_metadata(text).pre_bid_meeting
        assert meeting.date == "March 1, 2026"
        assert meeting.location == "GC Office"
        assert meeting.mandatory is False

    def test_indented_sub_fields(self):
        text = "Prebid Meeting:\n   Date: March 1, 2026\n   Location: Trailer 2\n"
        meeting = extract_metadata(text).pre_bid_meeting
        assert meeting.date == "March 1, 2026"
        assert meeting.location == "Trailer 2"

    def test_location_outside_block_not_used(self):
        text = "Location: 4500 River Rd\n\nPre-Bid Meeting:\nDate: March 1, 2026\n"
        meeting = extract_metadata(text).pre_bid_meeting
        assert meeting.location == ""
        assert meeting.date == "March 1, 2026"

    def test_no_meeting(self):
        assert extract_metadata("Nothing to see here.").pre_bid_meeting == PreBidMeeting()


class TestAddenda:

    def test_three_forms(self):
        text = (
            "Addendum No. 1 has been issued.\n"
            "Please also see Addendum #2 attached.\n"
            "Addendum 3 was posted to BuildingConnected."
        )
        addenda = extract_metadata(text).addenda
        assert len(addenda) == 3
        assert "Addendum No. 1" in addenda[0]

    def test_duplicates_removed_in_order(self):
        text = "Addendum #2 issued\n  Addendum #2 issued\naddendum 3 posted"
        assert extract_metadata(text).addenda == ("Addendum #2 issued", "addendum 3 posted")

    def test_bare_word_is_not_an_addendum(self):
        assert extract_metadata("An addendum will follow.").addenda == ()


class TestBondRequirements:

    def test_bond_lines_joined(self, structured_bid_email):
        bonds = extract_metadata(structured_bid_email).bond_requirements
        assert bonds == (
            "A 5% bid bond is required.\n"
            "Performance and payment bond required for contracts over $100,000."
        )

    def test_no_bond(self):
        assert extract_metadata("No bonding needed.").bond_requirements == ""


class TestExtractMetadata:

    def test_structured_email(self, structured_bid_email):
        meta = extract_metadata(structured_bid_email)
        assert meta.bid_time == "2:00 PM CST"
        assert meta.project_manager == "Sarah Connor"
        assert meta.addenda == ("Addendum No. 1 has been issued.",)

    def test_invalid_input(self):
        assert extract_metadata("") == Metadata()
        assert extract_metadata(None) == Metadata()
        assert extract_metadata(42) == Metadata()

    def test_to_dict(self):
        data = extract_metadata("").to_dict()
        assert data == {
            "bidTime": "",
            "projectManager": "",
            "preBidMeeting": {"date": "", "location": "", "mandatory": False},
            "addenda": [],
            "bondRequirements": "",
        }
