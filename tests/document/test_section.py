"""Tests for parsing a block of text into a Section."""

import copy
import dataclasses
import logging
import pickle
from concurrent.futures import ProcessPoolExecutor

import pytest

from document.errors import (
    ClassificationError,
    EmptyInputError,
    LineClassificationError,
    SectionParseError,
)
from document.models import Information, Section
from document.section import parse_section

IDENTITY_MATRIX = (
    "Identity Matrix\n"
    "Definition: A square matrix with 1s on the diagonal.\n"
    "Related: Orthogonal Mat"
)


def test_parses_identity_matrix_example():
    """Test the header, information and related maps of a typical block."""
    section = parse_section(IDENTITY_MATRIX)

    assert section.header == "Identity Matrix"
    assert section.information == {"Definition": ("A square matrix with 1s on the diagonal.",)}
    assert section.related == {"Related": ("Orthogonal Mat",)}


def test_header_is_first_line_verbatim():
    """Test that the header keeps surrounding whitespace."""
    section = parse_section("  Padded Header  \nDefinition: x")

    assert section.header == "  Padded Header  "


def test_header_only_block_has_empty_maps():
    """Test that a block without information lines is valid."""
    section = parse_section("Lonely Topic")

    assert section.header == "Lonely Topic"
    assert section.information == {}
    assert section.related == {}


def test_duplicate_categories_accumulate_in_order():
    """Test that repeated categories append rather than overwrite."""
    text = "\n".join(
        [
            "Matrix",
            "Children: Identity",
            "Example: [[1, 0], [0, 1]]",
            "Children: Orthogonal",
            "Example: [[0, 1], [1, 0]]",
            "Children: Diagonal",
        ]
    )

    section = parse_section(text)

    assert section.related["Children"] == ("Identity", "Orthogonal", "Diagonal")
    assert section.information["Example"] == ("[[1, 0], [0, 1]]", "[[0, 1], [1, 0]]")


def test_routes_reserved_categories_to_related():
    """Test that Ancestors, Children and Related never land in information."""
    text = "Vector Space\nAncestors: Set\nChildren: Subspace\nRelated: Field\nNotes: Closed"

    section = parse_section(text)

    assert set(section.related) == {"Ancestors", "Children", "Related"}
    assert set(section.information) == {"Notes"}


def test_empty_block_raises_empty_input_error():
    """Test that an empty block has no header to take."""
    with pytest.raises(EmptyInputError):
        parse_section("")


def test_empty_first_line_raises_empty_input_error():
    """Test that a block starting with a line break has no header."""
    with pytest.raises(EmptyInputError):
        parse_section("\nDefinition: x")


def test_malformed_second_line_raises_with_position():
    """Test that the failing line and its number are reported."""
    text = "Identity Matrix\nthis line has no category\nRelated: Orthogonal Mat"

    with pytest.raises(LineClassificationError) as exc_info:
        parse_section(text)

    assert exc_info.value.line == "this line has no category"
    assert exc_info.value.line_number == 2
    assert "Line 2" in str(exc_info.value)


def test_failure_on_later_line_reports_its_number():
    """Test that the position counts the header as line 1."""
    text = "Topic\nDefinition: fine\nAlso fine: yes\nbroken"

    with pytest.raises(LineClassificationError) as exc_info:
        parse_section(text)

    assert exc_info.value.line_number == 4


def test_trailing_line_break_is_an_empty_line():
    """Test that a trailing line break yields an unclassifiable empty line."""
    with pytest.raises(LineClassificationError) as exc_info:
        parse_section("Topic\nDefinition: x\n")

    assert exc_info.value.line == ""
    assert exc_info.value.line_number == 3


def test_parse_errors_share_a_base_class():
    """Test that callers can catch every parse failure at once."""
    for text in ["", "Topic\nbroken"]:
        with pytest.raises(SectionParseError):
            parse_section(text)


def test_uses_injected_classifier():
    """Test that any callable can classify lines."""

    def arrow_classifier(line: str) -> Information:
        category, sep, text = line.partition(" -> ")
        if not sep:
            raise ClassificationError(line, "Missing arrow")
        return Information(category, text)

    section = parse_section("Topic\nRelated -> Other\nSee -> Page 4", arrow_classifier)

    assert section.related == {"Related": ("Other",)}
    assert section.information == {"See": ("Page 4",)}

    with pytest.raises(LineClassificationError) as exc_info:
        parse_section("Topic\nRelated: Other", arrow_classifier)
    assert exc_info.value.reason == "Missing arrow"


def test_section_is_immutable():
    """Test that neither the fields nor the maps can be modified."""
    section = parse_section(IDENTITY_MATRIX)

    with pytest.raises(dataclasses.FrozenInstanceError):
        section.header = "Other"  # type: ignore[misc]
    with pytest.raises(TypeError):
        section.related["Related"] = ("Other",)  # type: ignore[index]
    assert isinstance(section.related["Related"], tuple)


def test_section_copies_input_maps():
    """Test that later changes to the input dicts do not leak in."""
    related = {"Related": ["A"]}
    section = Section(header="Topic", related=related)

    related["Related"].append("B")

    assert section.related["Related"] == ("A",)


@pytest.mark.parametrize(
    "information, related",
    [
        ({"Related": ["A"]}, {}),
        ({}, {"Definition": ["A"]}),
    ],
)
def test_section_rejects_misplaced_categories(information, related):
    """Test that the category invariant is enforced on construction."""
    with pytest.raises(ValueError):
        Section(header="Topic", information=information, related=related)


def test_markup_like_text_is_kept_verbatim(caplog):
    """Test that bracketed text is neither restyled nor fatal when logged."""
    text = "[red]Topic[/b]\nNotes: see [/x] here\nRelated: [bold]Other"

    with caplog.at_level(logging.DEBUG, logger="document.section"):
        section = parse_section(text)

    assert section.header == "[red]Topic[/b]"
    assert section.information == {"Notes": ("see [/x] here",)}
    assert section.related == {"Related": ("[bold]Other",)}


def test_section_pickles_and_deep_copies():
    """Test that sections survive pickling and deepcopy unchanged."""
    section = parse_section(IDENTITY_MATRIX)

    restored = pickle.loads(pickle.dumps(section))
    copied = copy.deepcopy(section)

    for other in (restored, copied):
        assert other == section
        assert isinstance(other.related["Related"], tuple)
        with pytest.raises(TypeError):
            other.related["Related"] = ()  # type: ignore[index]


def test_sections_cross_process_boundary():
    """Test that blocks can be parsed in worker processes."""
    blocks = [IDENTITY_MATRIX, "Orthogonal Matrix\nRelated: Identity"]

    with ProcessPoolExecutor(max_workers=2) as executor:
        sections = list(executor.map(parse_section, blocks))

    assert sections == [parse_section(block) for block in blocks]
