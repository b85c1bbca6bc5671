"""Parse note sections and resolve their shorthand references."""

from .batch import parse_sections, process_document, reconcile_sections, split_blocks
from .errors import (
    ClassificationError,
    EmptyInputError,
    LineClassificationError,
    SectionError,
    SectionParseError,
    UnresolvedReferenceError,
)
from .formatter import format_section, section_to_dict, sections_to_json
from .information import LineClassifier, classify_line
from .models import DocumentResult, Information, ParseBatch, ReconcileBatch, Section, SectionFailure
from .reconcile import HeaderIndex, TieBreak, find_matching_header, reconcile
from .section import parse_section

__all__ = [
    "ClassificationError",
    "DocumentResult",
    "EmptyInputError",
    "HeaderIndex",
    "Information",
    "LineClassificationError",
    "LineClassifier",
    "ParseBatch",
    "ReconcileBatch",
    "Section",
    "SectionError",
    "SectionFailure",
    "SectionParseError",
    "TieBreak",
    "UnresolvedReferenceError",
    "classify_line",
    "find_matching_header",
    "format_section",
    "parse_section",
    "parse_sections",
    "process_document",
    "reconcile",
    "reconcile_sections",
    "section_to_dict",
    "sections_to_json",
    "split_blocks",
]
