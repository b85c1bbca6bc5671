"""Resolve abbreviated related references to full section headers.

When writing a ``Related:`` line it is quicker to type the start of a header
("Orthogonal Mat") than the whole thing ("Orthogonal Matrix"). Reconciliation
replaces each reference with the header it abbreviates.
"""

import dataclasses
from collections.abc import Iterable, Sequence, Set
from enum import Enum

from rich.markup import escape

from common.logger import get_logger

from .errors import UnresolvedReferenceError
from .models import Section

logger = get_logger(__name__)


class TieBreak(str, Enum):
    """How to choose between several headers starting with the same reference."""

    FIRST = "first"  # First candidate in the caller-supplied header order
    SHORTEST = "shortest"  # Shortest candidate, caller order among equal lengths


def find_matching_header(
    reference: str,
    headers: Sequence[str],
    tie_break: TieBreak = TieBreak.FIRST,
) -> str | None:
    """Find the header that ``reference`` abbreviates.

    Args:
        reference: Possibly abbreviated header
        headers: Known headers in canonical order
        tie_break: Rule for picking among several matching headers

    Returns:
        Matching header, or None if no header starts with ``reference``
    """
    candidates = [h for h in headers if h.startswith(reference)]
    if not candidates:
        return None

    if len(candidates) > 1:
        logger.debug(
            f"Reference '{escape(reference)}' matches {len(candidates)} headers: "
            f"{escape(str(candidates))}"
        )

    if tie_break == TieBreak.SHORTEST:
        # min() keeps the first of equal lengths
        return min(candidates, key=len)
    return candidates[0]


def resolve_reference(
    reference: str,
    headers_set: Set[str],
    headers_seq: Sequence[str],
    tie_break: TieBreak = TieBreak.FIRST,
) -> str | None:
    """Resolve one reference: exact match wins, otherwise prefix search."""
    if reference in headers_set:
        return reference
    return find_matching_header(reference, headers_seq, tie_break)


def reconcile(
    section: Section,
    headers_set: Set[str],
    headers_seq: Sequence[str],
    tie_break: TieBreak = TieBreak.FIRST,
) -> Section:
    """Return a copy of ``section`` whose related references are full headers.

    Args:
        section: Section to be updated
        headers_set: All known headers, used for the exact-match check
        headers_seq: The same headers in canonical order, used for prefix search
        tie_break: Rule for picking among several matching headers

    Returns:
        New Section with the same header and information, updated related

    Raises:
        UnresolvedReferenceError: If a reference matches no header
    """
    related: dict[str, list[str]] = {}

    for category, references in section.related.items():
        resolved = []
        for reference in references:
            header = resolve_reference(reference, headers_set, headers_seq, tie_break)
            if header is None:
                raise UnresolvedReferenceError(reference, section.header, category)
            if header != reference:
                logger.debug(
                    f"'{escape(section.header)}' > {category}: "
                    f"'{escape(reference)}' -> '{escape(header)}'"
                )
            resolved.append(header)
        related[category] = resolved

    return dataclasses.replace(section, related=related)


class HeaderIndex:
    """The known headers of a document, as a set and in document order."""

    def __init__(self, headers: Iterable[str], tie_break: TieBreak = TieBreak.FIRST):
        """Initialize the index.

        Args:
            headers: Headers in canonical order; repeats keep their first position
            tie_break: Rule for picking among several matching headers
        """
        self.headers: list[str] = list(dict.fromkeys(headers))
        self.header_set: frozenset[str] = frozenset(self.headers)
        self.tie_break = TieBreak(tie_break)

    @classmethod
    def from_sections(
        cls, sections: Iterable[Section], tie_break: TieBreak = TieBreak.FIRST
    ) -> "HeaderIndex":
        """Build an index from sections, logging headers that appear twice."""
        headers = []
        seen = set()
        for section in sections:
            if section.header in seen:
                logger.warning(f"[yellow]⚠[/yellow] Duplicate header: '{escape(section.header)}'")
            seen.add(section.header)
            headers.append(section.header)
        return cls(headers, tie_break)

    def __len__(self) -> int:
        return len(self.headers)

    def __contains__(self, header: object) -> bool:
        return header in self.header_set

    def resolve(self, reference: str) -> str | None:
        """Resolve a reference against this index, or None if nothing matches."""
        return resolve_reference(reference, self.header_set, self.headers, self.tie_break)

    def reconcile(self, section: Section) -> Section:
        """Reconcile a section against this index."""
        return reconcile(section, self.header_set, self.headers, self.tie_break)
