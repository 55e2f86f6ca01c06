"""
Sender identity parsed from the closing block of an email.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class SignatureBlock:
    """Closing-block fields; empty string means not found."""

    name: str = ""
    title: str = ""
    company: str = ""              # third content line after the delimiter
    email: str = ""
    phone: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "title": self.title,
            "company": self.company,
            "email": self.email,
            "phone": self.phone,
        }
