"""Statement parsing for OFX/SGML style bank exports.

A statement holds zero or more ``<STMTTRN>`` record blocks. Each block must
carry ``<DTPOSTED>``, ``<TRNAMT>`` and ``<MEMO>`` tags, in any order:

    <STMTTRN>
    <TRNTYPE>DEBIT
    <DTPOSTED>20240105120000[-3:BRT]
    <TRNAMT>-120.00
    <MEMO>SUPERMARKET 123
    </STMTTRN>

Tag values are read up to the next tag, line break or end of text, so SGML
files without closing tags and XML files with them parse the same way.
"""

import logging
import re
from typing import Optional

from ledgerimport.domain.entities import DateRange, Direction, ParseResult, RawRecord
from ledgerimport.domain.errors import (
    EmptyResultError,
    OversizeError,
    ParseError,
    no_records_found,
)
from ledgerimport.utils.amount_parser import parse_amount, round_to_cents
from ledgerimport.utils.date_parser import parse_compact_date

logger = logging.getLogger(__name__)

RECORD_MARKER_RE = re.compile(r"<STMTTRN>", re.IGNORECASE)
RECORD_END_RE = re.compile(r"</STMTTRN>", re.IGNORECASE)
COMPACT_DATE_RE = re.compile(r"\d{8}")

DATE_TAG = "DTPOSTED"
AMOUNT_TAG = "TRNAMT"
DESCRIPTION_TAG = "MEMO"


def _tag_value(block: str, tag: str) -> Optional[str]:
    """Return the stripped value following ``<tag>``, or None if absent."""
    match = re.search(rf"<{tag}>(.*?)(?=[\r\n<]|$)", block, re.IGNORECASE)
    if match is None:
        return None
    return match.group(1).strip()


def _parse_block(block: str) -> RawRecord:
    """Parse one record block.

    Raises:
        ParseError: If a required tag is missing or holds an unusable value
    """
    date_value = _tag_value(block, DATE_TAG)
    if date_value is None:
        raise ParseError(f"Missing {DATE_TAG}")

    amount_value = _tag_value(block, AMOUNT_TAG)
    if amount_value is None:
        raise ParseError(f"Missing {AMOUNT_TAG}")

    description = _tag_value(block, DESCRIPTION_TAG)
    if description is None:
        raise ParseError(f"Missing {DESCRIPTION_TAG}")

    # DTPOSTED may carry a time and zone suffix after the date digits
    date_match = COMPACT_DATE_RE.match(date_value)
    if date_match is None:
        raise ParseError(f"Invalid {DATE_TAG} '{date_value}'")
    try:
        record_date = parse_compact_date(date_match.group())
    except ValueError as e:
        raise ParseError(str(e))

    try:
        signed_amount = parse_amount(amount_value)
    except ValueError as e:
        raise ParseError(str(e))

    return RawRecord(
        date=record_date,
        description=description,
        amount=round_to_cents(abs(signed_amount)),
        direction=Direction.from_amount(signed_amount),
    )


def split_record_blocks(text: str) -> list[str]:
    """Split statement text into record blocks.

    Text before the first marker is the statement header and is dropped.
    """
    blocks = RECORD_MARKER_RE.split(text)[1:]
    return [RECORD_END_RE.split(block, maxsplit=1)[0] for block in blocks]


def parse_statement(
    text: str,
    date_range: Optional[DateRange] = None,
    max_bytes: Optional[int] = None,
) -> ParseResult:
    """Extract transaction records from statement text.

    Malformed blocks are skipped and reported in ``errors``; records outside
    ``date_range`` are counted in ``ignored_count``. Record order follows the
    statement.

    Args:
        text: Raw statement text
        date_range: Optional inclusive date range filter
        max_bytes: Optional ceiling on the UTF-8 size of ``text``

    Returns:
        ParseResult with at least one record

    Raises:
        OversizeError: If ``text`` exceeds ``max_bytes`` (checked before parsing)
        EmptyResultError: If no record survives parsing and filtering
    """
    if max_bytes is not None:
        size = len(text.encode("utf-8"))
        if size > max_bytes:
            raise OversizeError(size, max_bytes)

    records: list[RawRecord] = []
    errors: list[str] = []
    ignored = 0

    for block_num, block in enumerate(split_record_blocks(text), start=1):
        try:
            record = _parse_block(block)
        except ParseError as e:
            logger.debug("Skipping block %d: %s", block_num, e)
            errors.append(f"Block {block_num}: {e}")
            continue

        if date_range is not None and not date_range.contains(record.date):
            ignored += 1
            continue

        records.append(record)

    if not records:
        raise EmptyResultError(
            no_records_found(ignored, len(errors)),
            ignored_count=ignored,
            error_count=len(errors),
        )

    logger.debug(
        "Parsed %d records (%d ignored, %d errors)", len(records), ignored, len(errors)
    )
    return ParseResult(records=records, ignored_count=ignored, errors=errors)
