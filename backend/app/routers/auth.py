"""
Authentication router for signup and signin.
"""
from fastapi import APIRouter, Depends, status

from app.dependencies.store import get_auth_service
from app.schemas.auth import AuthResponse, CredentialsRequest
from app.services.auth_service import AuthService

router = APIRouter(tags=["Authentication"])


@router.post(
    "/signup",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a username and password",
)
async def signup(
    body: CredentialsRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Store a new credential record.

    - **username**: Required, not checked for uniqueness
    - **password**: Required, stored as given

    Returns 403 if a field is missing or nothing was stored.
    """
    record = await auth_service.signup(body.username, body.password)
    return AuthResponse(
        message="user signup successfully",
        response=record.to_response(),
    )


@router.post(
    "/signin",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Check a username and password",
)
async def signin(
    body: CredentialsRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Verify credentials against the stored record.

    Returns 403 if a field is missing or the username is unknown,
    409 if the password does not match.
    """
    record = await auth_service.signin(body.username, body.password)
    return AuthResponse(
        message="user signin successfully",
        response=record.to_response(),
    )
