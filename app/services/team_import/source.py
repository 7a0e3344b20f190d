import io
from typing import Dict, List

import pandas as pd
from pydantic import BaseModel

from app.core.logging_config import logger
from app.services.team_import.errors import ParseError

SUPPORTED_EXTENSIONS = (".csv", ".xlsx", ".xls")


class SourceTable(BaseModel):
    """
    A parsed upload: the header row plus one {header: raw value} map per
    data row. Header order is preserved. Headers are assumed unique; when
    a file repeats a header, lookups see the last column with that name.
    """
    filename: str
    headers: List[str]
    rows: List[Dict[str, str]]

    @property
    def row_count(self) -> int:
        return len(self.rows)


def parse_source(content: bytes, filename: str) -> SourceTable:
    """
    Parse uploaded CSV or Excel content into a SourceTable.

    The first row is treated as the header row and every cell is read as
    a string, so values such as phone numbers keep their leading zeros.

    Args:
        content: Raw file bytes
        filename: Original filename, used to pick the parser

    Returns:
        SourceTable with headers and rows

    Raises:
        ParseError: If the file is empty, unsupported or malformed
    """
    lowered = (filename or "").lower()
    if not lowered:
        raise ParseError("No filename provided")
    if not lowered.endswith(SUPPORTED_EXTENSIONS):
        raise ParseError(f"Unsupported file format: {filename}")
    if not content or not content.strip():
        raise ParseError("The uploaded file is empty")

    try:
        if lowered.endswith(".csv"):
            df = pd.read_csv(
                io.BytesIO(content),
                header=None,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                encoding="utf-8-sig",
            )
        else:
            df = pd.read_excel(
                io.BytesIO(content),
                header=None,
                dtype=str,
                keep_default_na=False,
            )
    except Exception as e:
        # Excel engines raise their own types (BadZipFile, XLRDError, ...)
        logger.error(f"Error parsing file '{filename}': {str(e)}")
        raise ParseError(f"Failed to parse file: {str(e)}")

    df = df.fillna("")
    if df.empty:
        raise ParseError("The uploaded file has no header row")

    records = df.values.tolist()
    headers = [str(value).strip() for value in records[0]]
    if not any(headers):
        raise ParseError("The uploaded file has no header row")

    # dict(zip(...)) keeps the last value for a repeated header
    rows = [
        dict(zip(headers, (str(value) for value in record)))
        for record in records[1:]
    ]

    logger.info(f"Parsed file '{filename}': {len(rows)} rows, {len(headers)} columns")
    return SourceTable(filename=filename, headers=headers, rows=rows)
