from fastapi import APIRouter, Depends, HTTPException
from fastapi import status as http_status
from fastapi.security import OAuth2PasswordRequestForm

from app.auth.dependencies import get_current_user
from app.auth.schemas import CurrentUser, LoginRequest, LoginResponse, MeResponse
from app.auth.services import ServiceError, describe_current_user, login_user
from app.core.enums import UserType

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=http_status.HTTP_200_OK,
)
async def login(payload: LoginRequest) -> LoginResponse:
    try:
        return login_user(payload)
    except ServiceError as e:
        if e.status_code == http_status.HTTP_401_UNAUTHORIZED:
            raise HTTPException(
                status_code=e.status_code,
                detail=e.message,
                headers={"WWW-Authenticate": "Bearer"},
            )
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/login-oauth")
async def login_oauth(
    form_data: OAuth2PasswordRequestForm = Depends(),
):
    """OAuth2 password flow for the interactive docs. scope carries the user type (defaults to student)."""
    try:
        user_type = UserType(form_data.scopes[0]) if form_data.scopes else UserType.STUDENT
    except ValueError:
        raise HTTPException(status_code=http_status.HTTP_400_BAD_REQUEST, detail="Unknown user type")
    payload = LoginRequest(
        identifier=form_data.username.strip(),
        password=form_data.password,
        user_type=user_type,
    )
    try:
        result = login_user(payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return {
        "access_token": result.access_token,
        "token_type": "bearer",
    }


@router.get("/me", response_model=MeResponse)
async def me(current_user: CurrentUser = Depends(get_current_user)) -> MeResponse:
    """Current user and the dashboard the client should open."""
    try:
        return describe_current_user(current_user)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
