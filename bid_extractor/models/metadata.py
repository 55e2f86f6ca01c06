"""
Cross-cutting bid fields found anywhere in the body.
"""
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class PreBidMeeting:
    """Structured pre-bid meeting tuple."""

    date: str = ""
    location: str = ""
    mandatory: bool = False

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "location": self.location,
            "mandatory": self.mandatory,
        }


@dataclass(frozen=True)
class Metadata:
    """Bid time, contact and requirement details independent of sections."""

    bid_time: str = ""
    project_manager: str = ""
    pre_bid_meeting: PreBidMeeting = field(default_factory=PreBidMeeting)
    addenda: Tuple[str, ...] = ()
    bond_requirements: str = ""

    def to_dict(self) -> dict:
        return {
            "bidTime": self.bid_time,
            "projectManager": self.project_manager,
            "preBidMeeting": self.pre_bid_meeting.to_dict(),
            "addenda": list(self.addenda),
            "bondRequirements": self.bond_requirements,
        }
