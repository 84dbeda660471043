"""Permissive CSV tokenizer for spreadsheet exports.

Real-world HR exports are produced by Excel, LibreOffice and assorted
in-house tools, so the tokenizer accepts:
- a leading UTF-8 byte-order mark
- CRLF, LF or lone CR line endings
- "," and ";" as interchangeable delimiters within one document
- quoted fields with embedded delimiters, newlines and "" escapes
- unterminated quotes at end of input (implicitly closed)
"""

from typing import Dict, List

from mobility_import.logging import get_logger

logger = get_logger(__name__, component="parsing")

BOM = "\ufeff"
DELIMITERS = (",", ";")
QUOTE = '"'


def split_rows(text: str) -> List[List[str]]:
    """Split CSV text into rows of trimmed fields.

    Rows whose fields are all empty are dropped, which removes trailing
    blank lines and separator-only lines.

    Args:
        text: Raw CSV text

    Returns:
        List of rows, each a list of trimmed field strings
    """
    if text.startswith(BOM):
        text = text[1:]
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    rows: List[List[str]] = []
    current: List[str] = []
    field: List[str] = []
    in_quotes = False

    def end_field() -> None:
        current.append("".join(field).strip())
        field.clear()

    def end_row() -> None:
        nonlocal current
        if any(value != "" for value in current):
            rows.append(current)
        current = []

    i = 0
    length = len(text)
    while i < length:
        char = text[i]

        if in_quotes:
            if char == QUOTE:
                if i + 1 < length and text[i + 1] == QUOTE:
                    field.append(QUOTE)
                    i += 1
                else:
                    in_quotes = False
            else:
                field.append(char)
        elif char == QUOTE:
            in_quotes = True
        elif char in DELIMITERS:
            end_field()
        elif char == "\n":
            end_field()
            end_row()
        else:
            field.append(char)

        i += 1

    # Flush the final field; an open quote is treated as closed here
    end_field()
    end_row()

    return rows


def parse_csv_text(text: str) -> List[Dict[str, str]]:
    """Parse CSV text into header-keyed records.

    The first surviving row is the header row. Each following row is zipped
    against it by position: missing trailing cells become "", extra trailing
    cells are dropped. Duplicate headers keep the last value.

    Args:
        text: Raw CSV text

    Returns:
        One dict per data row, in file order. Empty list when the text has
        no header row plus at least one data row.

    Example:
        >>> parse_csv_text("a,b\\n1,2")
        [{'a': '1', 'b': '2'}]
    """
    rows = split_rows(text)

    if len(rows) < 2:
        logger.debug(
            "CSV text has no data rows",
            extra={"event": "parsing.csv.empty", "row_count": len(rows)},
        )
        return []

    headers = rows[0]
    records = []
    for row in rows[1:]:
        record: Dict[str, str] = {}
        for idx, header in enumerate(headers):
            record[header] = row[idx] if idx < len(row) else ""
        records.append(record)

    logger.debug(
        "Parsed CSV text",
        extra={
            "event": "parsing.csv.parsed",
            "header_count": len(headers),
            "record_count": len(records),
        },
    )
    return records
