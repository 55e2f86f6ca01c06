"""
Labeled fields and multi-line blocks of an email body.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class SectionSet:
    """Structured sections found in the greeting/signature-stripped body."""

    project: str = ""
    location: str = ""
    scope: str = ""
    submission_instructions: str = ""
    pre_bid_meeting: str = ""
    bond_requirements: str = ""
    addenda: str = ""
    general_notes: str = ""        # always the cleaned body, even when fields were found

    def to_dict(self) -> dict:
        return {
            "project": self.project,
            "location": self.location,
            "scope": self.scope,
            "submissionInstructions": self.submission_instructions,
            "preBidMeeting": self.pre_bid_meeting,
            "bondRequirements": self.bond_requirements,
            "addenda": self.addenda,
            "generalNotes": self.general_notes,
        }
