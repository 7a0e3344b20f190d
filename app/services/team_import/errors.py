class TeamImportError(Exception):
    """Base class for team import pipeline errors"""


class ParseError(TeamImportError):
    """Uploaded file could not be read as a table with a header row"""


class UnknownColumnError(TeamImportError):
    """A field was mapped to a header that the uploaded file does not have"""


class MappingIncompleteError(TeamImportError):
    """A required field has no column mapped, so preview cannot start"""


class ImportStateError(TeamImportError):
    """Operation is not allowed in the session's current state"""


class CandidateNotFoundError(TeamImportError):
    """No candidate team at the requested position"""


class AuditRecordError(TeamImportError):
    """The import run record could not be created; nothing was written"""
