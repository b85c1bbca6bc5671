"""Data models for parsed note sections."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from common.constants import RELATED_CATEGORIES

from .errors import SectionError


def _freeze(categories: Mapping[str, Sequence[str]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({category: tuple(texts) for category, texts in categories.items()})


@dataclass(frozen=True)
class Information:
    """One classified line: a category label and its text."""

    category: str
    text: str

    @property
    def is_related(self) -> bool:
        """Check if the text refers to another section's header."""
        return self.category in RELATED_CATEGORIES


@dataclass(frozen=True)
class Section:
    """A topic in the notes (e.g. Identity Matrix).

    Both maps are read-only views holding tuples, so a Section can be shared
    between batches without copying. Reconciliation builds a new Section
    rather than touching this one.
    """

    header: str
    information: Mapping[str, tuple[str, ...]] = field(default_factory=dict, hash=False)
    related: Mapping[str, tuple[str, ...]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        stray = set(self.related) - RELATED_CATEGORIES
        if stray:
            raise ValueError(f"Not related categories: {sorted(stray)}")

        reserved = set(self.information) & RELATED_CATEGORIES
        if reserved:
            raise ValueError(f"Related categories in information: {sorted(reserved)}")

        object.__setattr__(self, "information", _freeze(self.information))
        object.__setattr__(self, "related", _freeze(self.related))

    def __reduce__(self):
        # Read-only views cannot be pickled; rebuild from plain dicts
        return (
            self.__class__,
            (self.header, dict(self.information), dict(self.related)),
        )

    def __str__(self) -> str:
        from .formatter import format_section

        return format_section(self)

    @property
    def references(self) -> list[tuple[str, str]]:
        """All (category, reference) pairs from the related map, in order."""
        return [
            (category, reference)
            for category, references in self.related.items()
            for reference in references
        ]


@dataclass(frozen=True)
class SectionFailure:
    """A block of a batch that could not be processed."""

    index: int
    error: SectionError

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass
class ParseBatch:
    """Result of parsing many blocks: sections that parsed plus failures."""

    sections: list[Section]
    failures: list[SectionFailure]
    # Block index of each entry in sections
    indices: list[int]

    @property
    def is_clean(self) -> bool:
        return not self.failures


@dataclass
class ReconcileBatch:
    """Result of reconciling many sections."""

    sections: list[Section]
    failures: list[SectionFailure]
    indices: list[int]

    @property
    def is_clean(self) -> bool:
        return not self.failures


@dataclass
class DocumentResult:
    """Finalized sections of a document with every failure, keyed by block index."""

    sections: list[Section]
    failures: list[SectionFailure]
    block_count: int

    @property
    def is_clean(self) -> bool:
        """Check if every block parsed and reconciled."""
        return not self.failures
