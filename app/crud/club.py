from typing import Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from app.models.club import Club
from app.models.user import User
from app.crud.user import user as user_crud


class CRUDClub:
    """
    CRUD operations for Club model.

    Club has no club_id (it is the club), so it does not inherit from CRUDBase.
    """

    def __init__(self):
        self.model = Club

    def create_with_user(
        self,
        db: Session,
        *,
        club_name: str,
        email: str,
        full_name: Optional[str] = None
    ) -> Tuple[Club, User]:
        """
        Create a club and its first user atomically.

        Raises:
            ValueError: If a user with this email already exists
        """
        try:
            club = Club(name=club_name)
            db.add(club)
            db.flush()

            user = user_crud.create(
                db=db,
                email=email,
                club_id=club.id,
                full_name=full_name
            )

            db.commit()
            db.refresh(club)
            db.refresh(user)
            return club, user

        except IntegrityError as e:
            db.rollback()
            if "unique" in str(e).lower() or "user_email_key" in str(e):
                raise ValueError(f"User with email {email} already exists")
            raise e


club = CRUDClub()
