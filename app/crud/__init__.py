from app.crud.base import CRUDBase
from app.crud.team import team
from .pitch import pitch
from .fixture import fixture
from .email_template import email_template

__all__ = ["CRUDBase", "team", "pitch", "fixture", "email_template"]
