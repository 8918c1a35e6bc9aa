from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from app.auth.directory import get_account
from app.auth.schemas import CurrentUser
from app.auth.security import decode_access_token
from app.core.enums import UserType


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login-oauth")


async def get_current_user(
    token: str = Depends(oauth2_scheme),
) -> CurrentUser:
    """Resolve the authenticated user from the access token."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = decode_access_token(token)
    except JWTError:
        raise credentials_exception

    user_id = payload.get("sub")
    user_type_str = payload.get("user_type")
    if not user_id or not user_type_str:
        raise credentials_exception

    try:
        user_type = UserType(user_type_str)
    except ValueError:
        raise credentials_exception

    account = get_account(user_id)
    if not account or not account.is_active or account.user_type != user_type:
        raise credentials_exception

    return CurrentUser(id=account.user_id, user_type=account.user_type, name=account.full_name)
