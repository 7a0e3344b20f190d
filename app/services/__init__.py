from app.services.team import team_service
from app.services.pitch import pitch_service
from .fixture import fixture_service
from .email_template import email_template_service

__all__ = ["team_service", "pitch_service", "fixture_service", "email_template_service"]
