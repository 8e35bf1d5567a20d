import csv
import logging
from typing import Dict, List, Union

from config import CSV_DELIMITER, MAX_ROWS, MAX_UPLOAD_BYTES
from models.dataset_models import Cell, RawTable

logger = logging.getLogger(__name__)

# A single cell may be as large as the whole upload
csv.field_size_limit(max(csv.field_size_limit(), MAX_UPLOAD_BYTES))


class ParseError(ValueError):
    """Raised when uploaded text cannot be turned into a table."""


def decode_text(raw: Union[str, bytes]) -> str:
    if isinstance(raw, str):
        return raw
    try:
        # utf-8-sig drops a leading byte-order mark if present
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParseError(f"File is not valid UTF-8 text: {e.reason}") from e


def _split_fields(line: str, delimiter: str) -> List[str]:
    try:
        return next(csv.reader([line], delimiter=delimiter))
    except csv.Error as e:
        raise ParseError(f"Malformed CSV line: {e}") from e


def _unique_header(names: List[str]) -> List[str]:
    """Rename repeated header names to name_1, name_2, ... in order of appearance."""
    seen: Dict[str, int] = {}
    header: List[str] = []
    for name in names:
        if name not in seen:
            seen[name] = 0
            header.append(name)
            continue
        count = seen[name]
        candidate = name
        while candidate in seen:
            count += 1
            candidate = f"{name}_{count}"
        seen[name] = count
        seen[candidate] = 0
        header.append(candidate)
    return header


def parse(
    raw: Union[str, bytes],
    max_rows: int = MAX_ROWS,
    delimiter: str = CSV_DELIMITER,
) -> RawTable:
    """
    Parse delimited text with a header line into a RawTable.

    - blank lines (after trimming) are skipped
    - short rows are padded with missing cells, extra fields are dropped
    - only the first `max_rows` data rows are kept
    """
    if max_rows < 1:
        raise ValueError("max_rows must be a positive integer.")

    text = decode_text(raw)
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise ParseError("CSV has no header line.")

    names = _split_fields(lines[0], delimiter)
    if not any(name.strip() for name in names):
        raise ParseError("CSV header line is empty.")
    columns = _unique_header(names)

    rows: List[Dict[str, Cell]] = []
    for line in lines[1:]:
        if len(rows) >= max_rows:
            break
        fields = _split_fields(line, delimiter)
        rows.append(
            {
                col: Cell.from_raw(fields[i]) if i < len(fields) else Cell.missing()
                for i, col in enumerate(columns)
            }
        )

    logger.debug(
        "Parsed CSV - cols=%s rows=%s (discarded=%s)",
        len(columns), len(rows), max(0, len(lines) - 1 - len(rows)),
    )
    return RawTable(columns=columns, rows=rows)
