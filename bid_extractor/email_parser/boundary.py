"""
Earliest line-anchored pattern match in a text.

Shared by every sub-parser to locate closing lines, section headers,
reply headers and forwarded-message separators.
"""
from typing import Iterator, Match, Optional, Pattern, Sequence

from bid_extractor.models.boundary import BoundaryMatch


def find_earliest_boundary(
    text: str,
    patterns: Sequence[Pattern],
) -> Optional[BoundaryMatch]:
    """
    Find the earliest match of any pattern in *text*.

    Ties at the same offset go to the pattern listed first.

    Args:
        text: Text to scan.
        patterns: Ordered, pre-compiled multiline patterns.

    Returns:
        BoundaryMatch of the winning match, or None when the input is empty,
        not a string, or nothing matches.
    """
    if not text or not isinstance(text, str):
        return None

    best: Optional[BoundaryMatch] = None

    for index, pattern in enumerate(patterns):
        match = pattern.search(text)
        if match is None:
            continue
        # strict "<" keeps the earlier pattern on equal offsets
        if best is None or match.start() < best.start:
            best = BoundaryMatch(start=match.start(), end=match.end(), pattern_index=index)

    return best


def iter_boundaries(text: str, pattern: Pattern) -> Iterator[Match]:
    """Yield every match of *pattern* in *text*, in offset order."""
    if not text or not isinstance(text, str):
        return
    yield from pattern.finditer(text)
