"""
Reply/forward thread segments and the raw boundaries they are cut at.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ThreadMessage:
    """One message of a thread; index 0 of a thread is the newest."""

    sender: str = ""
    date: str = ""
    body: str = ""

    def to_dict(self) -> dict:
        return {
            "sender": self.sender,
            "date": self.date,
            "body": self.body,
        }


@dataclass
class ThreadBoundary:
    """Start of a thread segment found in the raw text."""

    offset: int
    header_end: int
    sender: str = ""
    date: str = ""
    is_forward: bool = False

    def __repr__(self) -> str:
        kind = "forward" if self.is_forward else "reply"
        return f"ThreadBoundary({kind}, [{self.offset},{self.header_end}], '{self.sender}')"
