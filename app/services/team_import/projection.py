import re
from typing import List, Optional

from pydantic import BaseModel

from app.services.team_import.mapping import FieldMapping, ImportField
from app.services.team_import.source import SourceTable

_TOKEN_START = re.compile(r"(^|\s)(\S)")


class CandidateEntity(BaseModel):
    """
    One team derived from an uploaded row, editable until commit.

    None means the field was not mapped; an empty string means it was
    mapped but the cell was blank.
    """
    name: str
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None


class CandidatePatch(BaseModel):
    """Partial edit of a candidate; only fields that are set are applied"""
    name: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None


def title_case(value: str) -> str:
    """
    Lower-case the whole string, then upper-case the first character of
    every whitespace-separated token.

    No special handling for apostrophes or acronyms:
    "o'neill fc" -> "O'neill Fc", "AFC WIMBLEDON" -> "Afc Wimbledon".
    """
    def _upper(match: re.Match) -> str:
        char = match.group(2)
        upper = char.upper()
        # Characters that expand when upper-cased (e.g. "ß") are left alone
        return match.group(1) + (upper if len(upper) == 1 else char)

    return _TOKEN_START.sub(_upper, value.lower())


def project_rows(table: SourceTable, mapping: FieldMapping) -> List[CandidateEntity]:
    """
    Apply a mapping to every row of the table, in row order.

    Args:
        table: Parsed upload
        mapping: Mapping with at least the team name column chosen

    Returns:
        One CandidateEntity per source row
    """
    candidates = []

    for row in table.rows:
        values = {}
        for field in ImportField:
            header = mapping.get(field)
            if not header:
                continue
            raw = row.get(header, "")
            values[field.value] = title_case(raw) if field is ImportField.name else raw

        values.setdefault(ImportField.name.value, "")
        candidates.append(CandidateEntity(**values))

    return candidates
