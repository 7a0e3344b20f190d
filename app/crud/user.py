from typing import Any, Dict, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.models.user import User


class CRUDUser:
    """
    CRUD operations for User model.

    Users are looked up globally by email when clubs are invited, so this
    does not use the club-isolated CRUDBase.
    """

    def __init__(self):
        self.model = User

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        result = db.execute(stmt)
        return result.scalar_one_or_none()

    def create(
        self,
        db: Session,
        *,
        email: str,
        club_id: int,
        full_name: Optional[str] = None,
        is_active: bool = True
    ) -> User:
        """
        Add a user to the session without committing.

        The caller commits, so the user can be created in the same
        transaction as its club.
        """
        db_user = User(
            email=email,
            full_name=full_name,
            club_id=club_id,
            is_active=is_active
        )
        db.add(db_user)
        db.flush()
        return db_user

    def update(self, db: Session, *, db_user: User, update_data: Dict[str, Any]) -> User:
        for field, value in update_data.items():
            setattr(db_user, field, value)
        db.add(db_user)
        db.commit()
        db.refresh(db_user)
        return db_user


user = CRUDUser()
