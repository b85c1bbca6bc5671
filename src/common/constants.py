"""Shared constants for the notes-sections application.

For environment-based configuration (log level, tie-break), use the env module:
    from common.env import env
    tie_break = env.reference_tie_break()
"""

# Lines inside a section block are separated by a single line break
LINE_BREAK = "\n"

# Separates a line's category label from its text ("Definition: ...")
CATEGORY_DELIMITER = ":"

# Categories whose values point at other sections' headers
ANCESTORS = "Ancestors"
CHILDREN = "Children"
RELATED = "Related"

RELATED_CATEGORIES: frozenset[str] = frozenset({ANCESTORS, CHILDREN, RELATED})
