from fastapi import Depends
from app.models.user import User
from app.dependencies import get_current_user


def get_club_id(current_user: User = Depends(get_current_user)) -> int:
    """
    FastAPI dependency that extracts club_id from the authenticated user.

    Every club-scoped route depends on this. The club_id is then passed
    explicitly through service and CRUD layers.

    Args:
        current_user: Authenticated user from JWT token

    Returns:
        Club ID of the current user
    """
    return current_user.club_id
