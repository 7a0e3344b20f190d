import enum
from difflib import SequenceMatcher
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel

from app.core.logging_config import logger
from app.services.team_import.errors import UnknownColumnError


class ImportField(str, enum.Enum):
    name = "name"
    contact_name = "contact_name"
    contact_email = "contact_email"
    contact_phone = "contact_phone"


REQUIRED_FIELDS = (ImportField.name,)

# Maps field identifier to user-friendly description
FIELD_DESCRIPTIONS = {
    ImportField.name: "Team Name *",
    ImportField.contact_name: "Contact Name",
    ImportField.contact_email: "Contact Email",
    ImportField.contact_phone: "Contact Phone",
}

# Column patterns for auto-mapping: field -> header names it usually goes by
AUTO_MAPPING_PATTERNS = {
    ImportField.name: ["team", "team name", "club", "club name", "opponent", "name"],
    ImportField.contact_name: ["contact", "contact name", "manager", "coach", "secretary", "fixtures secretary"],
    ImportField.contact_email: ["email", "e-mail", "mail", "email address", "contact email"],
    ImportField.contact_phone: ["phone", "telephone", "tel", "mobile", "phone number", "contact number"],
}

AUTO_MAPPING_THRESHOLD = 0.7


class FieldMapping(BaseModel):
    """
    Which uploaded column feeds each logical field. Unmapped fields are None.
    """
    name: Optional[str] = None
    contact_name: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None

    def get(self, field: ImportField) -> Optional[str]:
        return getattr(self, ImportField(field).value)

    def with_mapping(
        self,
        field: ImportField,
        header: Optional[str],
        headers: List[str]
    ) -> "FieldMapping":
        """
        Return a copy with `field` mapped to `header`, replacing any
        previous choice. An empty header clears the field.

        Raises:
            UnknownColumnError: If header is not one of the uploaded headers
        """
        field = ImportField(field)
        if header and header not in headers:
            raise UnknownColumnError(f"Column '{header}' does not exist in the uploaded file")
        return self.model_copy(update={field.value: header or None})

    def can_proceed(self) -> bool:
        return all(self.get(field) for field in REQUIRED_FIELDS)

    def as_config(self) -> Dict[str, str]:
        """Mapped fields only, as stored on import runs and saved mappings"""
        return {field.value: self.get(field) for field in ImportField if self.get(field)}


def suggest_mapping(
    headers: List[str],
    saved_mapping: Optional[Dict[str, str]] = None
) -> FieldMapping:
    """
    Build an initial mapping for an upload.

    Saved mappings are applied first (only where the header still exists),
    then remaining fields are matched against AUTO_MAPPING_PATTERNS using
    SequenceMatcher, assigning the best scoring pairs first so a column is
    never used twice.

    Args:
        headers: Headers of the uploaded file
        saved_mapping: Club's saved default mapping {field: header}

    Returns:
        Suggested FieldMapping
    """
    mapped: Dict[str, str] = {}
    used_headers = set()

    # PASS 1: saved mapping
    if saved_mapping:
        for field_name, header in saved_mapping.items():
            if field_name in ImportField.__members__ and header and header in headers:
                mapped[field_name] = header
                used_headers.add(header)
                logger.info(f"Applied saved mapping: '{field_name}' -> '{header}'")

    # PASS 2: fuzzy matching for the rest
    potential_matches: List[Tuple[str, str, float]] = []
    for field in ImportField:
        if field.value in mapped:
            continue

        for header in headers:
            if header in used_headers or not header:
                continue

            header_lower = header.lower().strip()
            best_score = 0.0
            for pattern in AUTO_MAPPING_PATTERNS[field]:
                score = SequenceMatcher(None, header_lower, pattern).ratio()
                if pattern in header_lower or header_lower in pattern:
                    score = max(score, 0.85)
                best_score = max(best_score, score)

            if best_score >= AUTO_MAPPING_THRESHOLD:
                potential_matches.append((field.value, header, best_score))

    potential_matches.sort(key=lambda match: match[2], reverse=True)
    for field_name, header, score in potential_matches:
        if field_name not in mapped and header not in used_headers:
            mapped[field_name] = header
            used_headers.add(header)
            logger.info(f"Auto-detected: field '{field_name}' -> column '{header}' (score: {score:.2f})")

    return FieldMapping(**mapped)
