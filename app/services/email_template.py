from pathlib import Path
from typing import Any, Dict, List, Optional
from fastapi import HTTPException, status
from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateSyntaxError, meta, nodes, select_autoescape
from jinja2.sandbox import SandboxedEnvironment
from sqlalchemy.orm import Session
from app.crud.email_template import email_template as email_template_crud
from app.schemas.email_template import EmailTemplateCreate, EmailTemplateUpdate, TemplateField
from app.schemas.fixture import FixtureEmailResponse
from app.models.email_template import EmailTemplate
from app.models.fixture import Fixture
from app.core.logging_config import logger

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
BUILTIN_TEMPLATE = "match_notification.html"

TEMPLATE_FIELDS: Dict[str, str] = {
    "match_date": "Match date, e.g. Saturday 12 October 2026",
    "kick_off": "Kick-off time (HH:MM)",
    "status": "Fixture status",
    "notes": "Fixture notes",
    "home_team.name": "Home team name",
    "home_team.team_color": "Home team colours",
    "home_team.age_group": "Home team age group",
    "away_team.name": "Away team name",
    "pitch.name": "Pitch name",
    "pitch.address_line1": "Pitch address",
    "pitch.city": "Pitch town or city",
    "pitch.postal_code": "Pitch postcode",
    "pitch.map_url": "Google Maps link to the pitch",
    "pitch.parking_info": "Parking information",
    "pitch.access_instructions": "Access instructions",
    "pitch.equipment_requirements": "Equipment requirements",
}

# Stored templates are user-written, so they only ever run sandboxed
_html_env = SandboxedEnvironment(autoescape=True)
_text_env = SandboxedEnvironment(autoescape=False)
_builtin_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"])
)


def _unknown_fields(source: str) -> List[str]:
    """
    Placeholders in a template that are not in TEMPLATE_FIELDS.

    Raises:
        TemplateSyntaxError: If the template does not parse
    """
    roots = {field.split(".")[0] for field in TEMPLATE_FIELDS}
    ast = _html_env.parse(source)
    unknown = meta.find_undeclared_variables(ast) - roots

    for attr in ast.find_all(nodes.Getattr):
        if isinstance(attr.node, nodes.Name) and attr.node.name in roots:
            path = f"{attr.node.name}.{attr.attr}"
            if path not in TEMPLATE_FIELDS:
                unknown.add(path)

    return sorted(unknown)


def validate_template(subject: str, content: str) -> None:
    """
    Check a template's subject and content before saving.

    Raises:
        HTTPException 422: On a syntax error or an unknown placeholder
    """
    for label, source in (("subject", subject), ("content", content)):
        try:
            unknown = _unknown_fields(source)
        except TemplateSyntaxError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Template {label} is invalid (line {e.lineno}): {e.message}"
            )
        if unknown:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Template {label} uses unknown fields: {', '.join(unknown)}"
            )


def build_fixture_context(fixture: Fixture) -> Dict[str, Any]:
    """Values available to templates when rendering a fixture email"""
    match_date = fixture.match_date
    pitch = fixture.pitch
    home = fixture.home_team
    return {
        "match_date": f"{match_date:%A} {match_date.day} {match_date:%B %Y}",
        "kick_off": f"{match_date:%H:%M}",
        "status": fixture.status.value,
        "notes": fixture.notes or "",
        "home_team": {
            "name": home.name,
            "team_color": home.team_color,
            "age_group": home.age_group,
        },
        "away_team": {"name": fixture.away_team.name},
        "pitch": {
            "name": pitch.name,
            "address_line1": pitch.address_line1,
            "city": pitch.city,
            "postal_code": pitch.postal_code,
            "map_url": pitch.map_url,
            "parking_info": pitch.parking_info or "",
            "access_instructions": pitch.access_instructions or "",
            "equipment_requirements": pitch.equipment_requirements or "",
            "amenities": pitch.amenities or {},
        },
    }


class EmailTemplateService:
    """
    Stored email templates and fixture email rendering.

    Templates use {{field}} placeholders from TEMPLATE_FIELDS and are
    rendered in a Jinja2 sandbox.
    """

    def __init__(self):
        self.crud = email_template_crud

    def get_fields(self) -> List[TemplateField]:
        return [TemplateField(field=field, description=desc) for field, desc in TEMPLATE_FIELDS.items()]

    def get_template(self, db: Session, template_id: int, club_id: int) -> EmailTemplate:
        """
        Raises:
            HTTPException 404: If template not found
        """
        template = self.crud.get(db=db, id=template_id, club_id=club_id)

        if not template:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Email template not found"
            )

        return template

    def get_templates(self, db: Session, club_id: int, skip: int = 0, limit: int = 100) -> List[EmailTemplate]:
        return self.crud.get_multi(db=db, skip=skip, limit=limit, club_id=club_id)

    def create_template(
        self,
        db: Session,
        template_data: EmailTemplateCreate,
        club_id: int,
        user_id: Optional[int] = None
    ) -> EmailTemplate:
        validate_template(template_data.subject, template_data.content)
        template = self.crud.create(db=db, obj_in=template_data, club_id=club_id, created_by=user_id)
        logger.info(f"Created email template id={template.id} '{template.name}' for club={club_id}")
        return template

    def update_template(
        self,
        db: Session,
        template_id: int,
        template_data: EmailTemplateUpdate,
        club_id: int
    ) -> EmailTemplate:
        template = self.get_template(db=db, template_id=template_id, club_id=club_id)
        validate_template(
            template_data.subject if template_data.subject is not None else template.subject,
            template_data.content if template_data.content is not None else template.content
        )
        return self.crud.update(db=db, db_obj=template, obj_in=template_data)

    def delete_template(self, db: Session, template_id: int, club_id: int) -> None:
        deleted = self.crud.delete(db=db, id=template_id, club_id=club_id)

        if not deleted:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Email template not found"
            )

    def render_fixture_email(
        self,
        db: Session,
        fixture: Fixture,
        club_id: int,
        template_id: Optional[int] = None
    ) -> FixtureEmailResponse:
        """
        Render the email for a fixture.

        Args:
            fixture: Fixture with teams and pitch loaded
            template_id: Stored template to use; the built-in match
                notification when None

        Raises:
            HTTPException 404: If the template does not exist for this club
            HTTPException 422: If the stored template fails to render
        """
        context = build_fixture_context(fixture)

        if template_id is None:
            html = _builtin_env.get_template(BUILTIN_TEMPLATE).render(**context)
            subject = f"Match Details: {context['home_team']['name']} vs {context['away_team']['name']}"
        else:
            template = self.get_template(db=db, template_id=template_id, club_id=club_id)
            try:
                subject = _text_env.from_string(template.subject).render(**context)
                html = _html_env.from_string(template.content).render(**context)
            except TemplateError as e:
                logger.error(f"Failed to render template {template_id} for fixture {fixture.id}: {str(e)}")
                raise HTTPException(
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    detail=f"Template could not be rendered: {str(e)}"
                )

        logger.info(f"Rendered email for fixture {fixture.id} (template={template_id or 'built-in'})")
        return FixtureEmailResponse(
            fixture_id=fixture.id,
            template_id=template_id,
            subject=subject,
            html=html
        )


email_template_service = EmailTemplateService()
