"""Render sections for display and serialization."""

import json
from collections.abc import Iterable
from typing import Any

from .models import Section


def format_section(section: Section) -> str:
    """
    Render the header followed by one line per related category.

    e.g., 'Identity Matrix\\nRelated: ["Orthogonal Matrix"]'

    Information is not rendered.
    """
    lines = [section.header]
    for category, references in section.related.items():
        lines.append(f"{category}: {json.dumps(list(references), ensure_ascii=False)}")
    return "\n".join(lines)


def section_to_dict(section: Section) -> dict[str, Any]:
    """Convert a section to plain JSON-compatible types."""
    return {
        "header": section.header,
        "information": {k: list(v) for k, v in section.information.items()},
        "related": {k: list(v) for k, v in section.related.items()},
    }


def sections_to_json(sections: Iterable[Section]) -> str:
    """Dump sections as a pretty-printed JSON array."""
    return json.dumps(
        [section_to_dict(s) for s in sections],
        indent=2,
        ensure_ascii=False,
    )
