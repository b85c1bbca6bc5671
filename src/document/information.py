"""Line classification: turn one line of a section into (category, text).

The section parser only depends on the ``LineClassifier`` shape, so callers
can pass any function that accepts a line and returns an ``Information`` or
raises ``ClassificationError``.
"""

from collections.abc import Callable

from common.constants import CATEGORY_DELIMITER

from .errors import ClassificationError
from .models import Information

LineClassifier = Callable[[str], Information]


def classify_line(line: str) -> Information:
    """
    Split a ``Category: text`` line on its first delimiter.

    e.g., 'Definition: A square matrix.' -> Information('Definition', 'A square matrix.')
    e.g., 'Related: Orthogonal Mat' -> Information('Related', 'Orthogonal Mat')

    Both parts are stripped. Colons after the first one belong to the text.

    Raises:
        ClassificationError: If the delimiter is missing or either part is empty
    """
    category, delimiter, text = line.partition(CATEGORY_DELIMITER)
    if not delimiter:
        raise ClassificationError(line, f"Missing '{CATEGORY_DELIMITER}' after category")

    category = category.strip()
    text = text.strip()

    if not category:
        raise ClassificationError(line, "Empty category")
    if not text:
        raise ClassificationError(line, f"Empty text for category '{category}'")

    return Information(category=category, text=text)
