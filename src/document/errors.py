"""Exceptions raised while parsing and reconciling note sections."""


class SectionError(Exception):
    """Base exception for section processing."""

    pass


class SectionParseError(SectionError):
    """A text block could not be turned into a Section."""

    pass


class EmptyInputError(SectionParseError):
    """The block has no lines, so there is no header."""

    def __init__(self) -> None:
        super().__init__("Section block is empty, expected a header line")


class ClassificationError(SectionError):
    """A line classifier could not split a line into category and text."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class LineClassificationError(SectionParseError):
    """A line inside a block failed classification.

    Attributes:
        line: The offending line, verbatim
        line_number: 1-based position of the line in its block (header is line 1)
        reason: Why the classifier rejected it
    """

    def __init__(self, line: str, line_number: int, reason: str):
        self.line = line
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}: {line!r}")


class UnresolvedReferenceError(SectionError):
    """A related reference matched no known header, exactly or as a prefix."""

    def __init__(self, reference: str, header: str, category: str):
        self.reference = reference
        self.header = header
        self.category = category
        super().__init__(
            f"Unresolved reference {reference!r} in '{header}' > {category}: "
            "no known header starts with it"
        )
