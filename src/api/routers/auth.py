"""Signup and signin endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_account_service, get_async_session
from schemas.auth import AccessTokenResponse, AuthRequest, SignupRequest
from services.account_service import AccountService
from services.exceptions import CredentialsIncorrectError, CredentialsTakenError

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AccessTokenResponse, status_code=201)
async def signup(
    data: SignupRequest,
    db: AsyncSession = Depends(get_async_session),
    account_service: AccountService = Depends(get_account_service),
) -> AccessTokenResponse:
    """
    Register a new account and return an access token.

    Returns 403 with a generic message if the credentials are already taken.
    """
    try:
        token = await account_service.signup(
            db,
            email=data.email,
            password=data.password,
            first_name=data.first_name,
            last_name=data.last_name,
        )
    except CredentialsTakenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return AccessTokenResponse(access_token=token)


@router.post("/signin", response_model=AccessTokenResponse)
async def signin(
    data: AuthRequest,
    db: AsyncSession = Depends(get_async_session),
    account_service: AccountService = Depends(get_account_service),
) -> AccessTokenResponse:
    """
    Sign in with email and password and return an access token.

    An unknown email and a wrong password produce the same 403 response.
    """
    try:
        token = await account_service.signin(db, email=data.email, password=data.password)
    except CredentialsIncorrectError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return AccessTokenResponse(access_token=token)
