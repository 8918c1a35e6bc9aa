from fastapi import Depends, HTTPException, status

from app.auth.dependencies import get_current_user
from app.auth.schemas import CurrentUser
from app.core.enums import UserType


def require_user_type(*allowed: UserType):
    """
    Dependency factory restricting an endpoint to the given roles.

    Example:
        Depends(require_user_type(UserType.FACULTY, UserType.ADMIN))
    """

    async def _checker(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if current_user.user_type not in allowed:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user

    return _checker


require_student = require_user_type(UserType.STUDENT)
require_faculty = require_user_type(UserType.FACULTY)
require_admin = require_user_type(UserType.ADMIN)
require_staff = require_user_type(UserType.FACULTY, UserType.ADMIN)
