"""
Example: Parsing and reconciling note sections programmatically.

This example shows how to use the document package from Python code,
rather than the CLI.
"""

from document import (
    HeaderIndex,
    Information,
    TieBreak,
    format_section,
    parse_section,
    process_document,
)
from document.errors import ClassificationError, SectionError

NOTES = """Matrix
Definition: A rectangular array of numbers.
Children: Identity
Children: Orthogonal M

Identity Matrix
Definition: A square matrix with 1s on the diagonal.
Ancestors: Matrix
Related: Orthogonal

Orthogonal Matrix
Definition: A square matrix whose transpose is its inverse.
Ancestors: Mat

Orthogonal Group
Definition: The group of orthogonal matrices under multiplication.
Related: Orthogonal Matrix
"""


# Example 1: Process a whole document
def document_example():
    """Parse every block, then resolve abbreviations against all headers."""
    result = process_document(NOTES, tie_break=TieBreak.SHORTEST)

    for section in result.sections:
        print(format_section(section))
        print()

    for failure in result.failures:
        print(f"Block {failure.index}: {failure.message}")


# Example 2: Run the two phases yourself
def two_phase_example():
    """Parse sections one at a time, then reconcile with a shared index."""
    blocks = NOTES.strip().split("\n\n")
    sections = [parse_section(block) for block in blocks]

    index = HeaderIndex.from_sections(sections)
    for section in sections:
        try:
            print(format_section(index.reconcile(section)))
        except SectionError as e:
            print(f"Skipping '{section.header}': {e}")


# Example 3: Use a different line syntax
def custom_classifier_example():
    """Classify 'Category - text' lines instead of 'Category: text'."""

    def dash_classifier(line: str) -> Information:
        category, sep, text = line.partition(" - ")
        if not sep:
            raise ClassificationError(line, "Missing ' - ' separator")
        return Information(category.strip(), text.strip())

    section = parse_section("Identity Matrix\nRelated - Orthogonal Matrix", dash_classifier)
    print(section.related)


if __name__ == "__main__":
    print("=" * 80)
    print("Example 1: Whole document")
    print("=" * 80)
    document_example()

    print("=" * 80)
    print("Example 2: Two phases")
    print("=" * 80)
    two_phase_example()

    print("=" * 80)
    print("Example 3: Custom classifier")
    print("=" * 80)
    custom_classifier_example()
