from sqlalchemy.orm import Session
from app.crud.user import user as user_crud
from app.models.user import User
from app.schemas.user import ProfileResponse, ProfileUpdate
from app.core.logging_config import logger


class UserService:
    """Service for the signed-in user's own profile"""

    def get_profile(self, current_user: User) -> ProfileResponse:
        return ProfileResponse(
            id=current_user.id,
            email=current_user.email,
            full_name=current_user.full_name,
            avatar_url=current_user.avatar_url,
            club_id=current_user.club_id,
            club_name=current_user.club.name,
            is_active=current_user.is_active,
            created_at=current_user.created_at,
        )

    def update_profile(
        self,
        db: Session,
        current_user: User,
        profile_data: ProfileUpdate
    ) -> ProfileResponse:
        """
        Update the user's name and avatar.

        Only the fields sent are changed. Sending avatar_url as null removes
        the avatar.
        """
        update_data = profile_data.model_dump(exclude_unset=True)
        if update_data.get("avatar_url") is not None:
            update_data["avatar_url"] = str(update_data["avatar_url"])

        updated = user_crud.update(db, db_user=current_user, update_data=update_data)
        logger.info(f"Updated profile for user={updated.id}: {', '.join(update_data) or 'no changes'}")
        return self.get_profile(updated)


user_service = UserService()
