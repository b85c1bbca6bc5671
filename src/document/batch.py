"""
Process a whole notes document: split into blocks, parse, then reconcile.

Reconciliation needs every header of the document, so all blocks are parsed
first and only then reconciled. A block that fails either step is reported
as a SectionFailure and the rest of the document is still processed.
"""

from collections.abc import Iterable, Sequence

from rich.markup import escape

from common.constants import LINE_BREAK
from common.logger import get_logger

from .errors import SectionParseError, UnresolvedReferenceError
from .information import LineClassifier, classify_line
from .models import DocumentResult, ParseBatch, ReconcileBatch, Section, SectionFailure
from .reconcile import HeaderIndex, TieBreak
from .section import parse_section

logger = get_logger(__name__)


def split_blocks(document: str) -> list[str]:
    """
    Split a document into section blocks on blank lines.

    Lines end at "\\n" or "\\r\\n" only; form feeds and other Unicode line
    separators stay inside the line text. A blank line is empty or whitespace
    only. Blocks keep their lines verbatim and never carry a trailing line
    break, so every returned block starts with its header line.
    """
    blocks: list[str] = []
    current: list[str] = []

    for line in document.split(LINE_BREAK):
        line = line.removesuffix("\r")
        if line.strip():
            current.append(line)
        elif current:
            blocks.append(LINE_BREAK.join(current))
            current = []

    if current:
        blocks.append(LINE_BREAK.join(current))

    return blocks


def parse_sections(
    blocks: Iterable[str],
    classifier: LineClassifier = classify_line,
) -> ParseBatch:
    """Parse every block, collecting failures instead of stopping at the first.

    Args:
        blocks: Section blocks in document order
        classifier: Line classifier handed to the parser

    Returns:
        ParseBatch with parsed sections and (block index, error) failures
    """
    batch = ParseBatch(sections=[], failures=[], indices=[])

    for index, block in enumerate(blocks):
        try:
            section = parse_section(block, classifier)
        except SectionParseError as e:
            logger.warning(f"[yellow]⚠[/yellow] Block {index} not parsed: {escape(str(e))}")
            batch.failures.append(SectionFailure(index=index, error=e))
            continue
        batch.sections.append(section)
        batch.indices.append(index)

    return batch


def reconcile_sections(
    sections: Sequence[Section],
    tie_break: TieBreak = TieBreak.FIRST,
    index: HeaderIndex | None = None,
) -> ReconcileBatch:
    """Reconcile every section against the headers of all of them.

    Args:
        sections: Parsed sections in document order
        tie_break: Rule for references matching several headers
        index: Prebuilt header index; built from ``sections`` when omitted

    Returns:
        ReconcileBatch; failure indices are positions in ``sections``
    """
    if index is None:
        index = HeaderIndex.from_sections(sections, tie_break)

    batch = ReconcileBatch(sections=[], failures=[], indices=[])

    for position, section in enumerate(sections):
        try:
            reconciled = index.reconcile(section)
        except UnresolvedReferenceError as e:
            logger.warning(
                f"[yellow]⚠[/yellow] Section {position} not reconciled: {escape(str(e))}"
            )
            batch.failures.append(SectionFailure(index=position, error=e))
            continue
        batch.sections.append(reconciled)
        batch.indices.append(position)

    return batch


def process_document(
    document: str,
    classifier: LineClassifier = classify_line,
    tie_break: TieBreak = TieBreak.FIRST,
) -> DocumentResult:
    """Parse and reconcile every section of a document.

    Failure indices in the result always refer to block positions in the
    document, whichever phase produced them.
    """
    blocks = split_blocks(document)
    logger.debug(f"Found {len(blocks)} block(s)")

    parsed = parse_sections(blocks, classifier)
    reconciled = reconcile_sections(parsed.sections, tie_break)

    failures = list(parsed.failures)
    for failure in reconciled.failures:
        block_index = parsed.indices[failure.index]
        failures.append(SectionFailure(index=block_index, error=failure.error))
    failures.sort(key=lambda f: f.index)

    return DocumentResult(
        sections=reconciled.sections,
        failures=failures,
        block_count=len(blocks),
    )
