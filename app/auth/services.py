from datetime import datetime, timezone

from fastapi import status

from app.auth.directory import find_account, get_account
from app.auth.schemas import CurrentUser, LoginRequest, LoginResponse, MeResponse, UserInfo
from app.auth.security import create_access_token, verify_password
from app.core.enums import UserType
from app.core.exceptions import ServiceError
from app.core.logging_config import get_logger

logger = get_logger(__name__)


def _invalid_credentials_message(user_type: UserType) -> str:
    if user_type == UserType.STUDENT:
        return "Invalid enrollment number or password"
    return "Invalid employee id or password"


def login_user(payload: LoginRequest) -> LoginResponse:
    # 1. Find account for this role by identifier (case-insensitive)
    account = find_account(payload.identifier, payload.user_type)
    if not account or not verify_password(payload.password, account.password_hash):
        logger.info("Login failed for %s (%s)", payload.identifier, payload.user_type.value)
        raise ServiceError(_invalid_credentials_message(payload.user_type), status.HTTP_401_UNAUTHORIZED)

    # 2. Reject deactivated accounts
    if not account.is_active:
        raise ServiceError("Account is inactive", status.HTTP_403_FORBIDDEN)

    # 3. Issue token; the role picks the landing dashboard
    access_token = create_access_token(
        subject={"sub": account.user_id, "user_type": account.user_type.value}
    )
    logger.info("User %s logged in as %s", account.user_id, account.user_type.value)

    return LoginResponse(
        access_token=access_token,
        user=UserInfo(
            id=account.user_id,
            name=account.full_name,
            email=account.email,
            user_type=account.user_type,
        ),
        dashboard=account.user_type.dashboard,
        issued_at=datetime.now(timezone.utc),
    )


def describe_current_user(current_user: CurrentUser) -> MeResponse:
    account = get_account(current_user.id)
    if not account:
        raise ServiceError("User not found", status.HTTP_404_NOT_FOUND)
    return MeResponse(
        user=UserInfo(
            id=account.user_id,
            name=account.full_name,
            email=account.email,
            user_type=account.user_type,
        ),
        dashboard=account.user_type.dashboard,
    )
