"""
ParsedEmail — merged output of the email structure parser.
"""
from dataclasses import dataclass, field
from typing import Tuple

from bid_extractor.models.metadata import Metadata
from bid_extractor.models.sections import SectionSet
from bid_extractor.models.signature import SignatureBlock
from bid_extractor.models.thread_message import ThreadMessage


@dataclass(frozen=True)
class ParsedEmail:
    """Signature, sections, thread and metadata computed from one body."""

    signature: SignatureBlock = field(default_factory=SignatureBlock)
    sections: SectionSet = field(default_factory=SectionSet)
    thread: Tuple[ThreadMessage, ...] = ()
    metadata: Metadata = field(default_factory=Metadata)

    def to_dict(self) -> dict:
        return {
            "signature": self.signature.to_dict(),
            "sections": self.sections.to_dict(),
            "thread": [message.to_dict() for message in self.thread],
            "metadata": self.metadata.to_dict(),
        }
