from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.crud.base import CRUDBase
from app.models.email_template import EmailTemplate
from app.schemas.email_template import EmailTemplateCreate, EmailTemplateUpdate


class CRUDEmailTemplate(CRUDBase[EmailTemplate, EmailTemplateCreate, EmailTemplateUpdate]):

    def get_multi(
        self,
        db: Session,
        *,
        skip: int = 0,
        limit: int = 100,
        club_id: int
    ) -> List[EmailTemplate]:
        stmt = select(EmailTemplate).where(
            EmailTemplate.club_id == club_id
        ).order_by(EmailTemplate.name, EmailTemplate.id).offset(skip).limit(limit)
        return list(db.execute(stmt).scalars().all())


email_template = CRUDEmailTemplate(EmailTemplate)
