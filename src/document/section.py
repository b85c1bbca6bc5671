"""Parse a paragraph of notes into a Section.

A paragraph looks like:

    Identity Matrix
    Definition: A square matrix with 1s on the diagonal.
    Related: Orthogonal Mat

The first line is the header. Every other line is classified into a category
and its text; ``Ancestors``, ``Children`` and ``Related`` point to other
sections and go to ``related``, everything else goes to ``information``.
"""

from rich.markup import escape

from common.constants import LINE_BREAK
from common.logger import get_logger

from .errors import ClassificationError, EmptyInputError, LineClassificationError
from .information import LineClassifier, classify_line
from .models import Section

logger = get_logger(__name__)


def parse_section(text: str, classifier: LineClassifier = classify_line) -> Section:
    """Parse a block of text into a Section.

    Args:
        text: One section block, lines separated by a line break
        classifier: Turns a line into Information, raising ClassificationError

    Returns:
        Section with the header and both category maps populated

    Raises:
        EmptyInputError: If the block is empty or its first line is empty
        LineClassificationError: If any line after the header fails classification
    """
    header, *lines = text.split(LINE_BREAK)
    if not header:
        raise EmptyInputError()

    information: dict[str, list[str]] = {}
    related: dict[str, list[str]] = {}

    # Header is line 1
    for line_number, line in enumerate(lines, start=2):
        try:
            info = classifier(line)
        except ClassificationError as e:
            raise LineClassificationError(line, line_number, e.reason) from e

        target = related if info.is_related else information
        target.setdefault(info.category, []).append(info.text)

    logger.debug(
        f"Parsed section '{escape(header)}': {len(information)} information, "
        f"{len(related)} related categories"
    )

    return Section(header=header, information=information, related=related)
