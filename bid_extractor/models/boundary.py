"""
Result type of the boundary detector.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class BoundaryMatch:
    """Span of the winning pattern match and its position in the pattern list."""

    start: int
    end: int
    pattern_index: int

    def __repr__(self) -> str:
        return f"BoundaryMatch([{self.start},{self.end}], pattern={self.pattern_index})"
