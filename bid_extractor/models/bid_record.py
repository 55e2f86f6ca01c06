"""
Typed Pydantic models for the persisted bid extraction record.

Covers the parser → storage/export interface, providing type safety where
the record is otherwise passed around as a plain dict. Field names follow
the camelCase contract consumed by the popup and the storage layer.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Attachment(BaseModel):
    """A file attached to or linked from the bid email."""

    name: str
    url: str = ""
    type: str = Field("file", description="'document' | 'drawing' | 'spreadsheet' | 'archive' | 'file' | 'drive'")


class PreBidMeetingInfo(BaseModel):
    date: str = ""
    location: str = ""
    mandatory: bool = False


class ThreadEntry(BaseModel):
    sender: str = ""
    date: str = ""
    body: str = ""


class PriorityInfo(BaseModel):
    """
    Result of BidPriorityScorer.score().

    The score is the capped sum of the weighted components; signals list
    the components that contributed (for audit).
    """

    score: float = Field(..., ge=0.0, le=100.0)
    value: str = Field(..., description="'high' | 'medium' | 'low'")
    label: str
    signals: List[str] = Field(default_factory=list)

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        allowed = {"high", "medium", "low"}
        if v not in allowed:
            raise ValueError(f"priority value must be one of {allowed}, got '{v}'")
        return v


class BidRecord(BaseModel):
    """
    Extraction record for one bid email.

    Every string field defaults to "" so a sparse parse still produces a
    complete record.
    """

    messageId: str = ""
    project: str = ""
    gc: str = ""
    bidDate: str = ""
    bidTime: str = ""
    location: str = ""
    scope: str = ""
    contact: str = ""
    email: str = ""
    phone: str = ""
    projectManager: str = ""
    submissionInstructions: str = ""
    preBidMeeting: PreBidMeetingInfo = Field(default_factory=PreBidMeetingInfo)
    addenda: List[str] = Field(default_factory=list)
    bondRequirements: str = ""
    generalNotes: str = ""
    threadMessages: List[ThreadEntry] = Field(default_factory=list)
    attachments: List[Attachment] = Field(default_factory=list)
    rawSubject: str = ""
    extractedAt: str = Field("", description="ISO-8601 timestamp of the extraction.")
    priority: Optional[PriorityInfo] = None
