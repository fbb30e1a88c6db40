"""Demo authentication endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from neudebri.core.dependencies import get_auth_service
from neudebri.core.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
)
from neudebri.schemas import AuthResponse, LoginRequest, UserCreate
from neudebri.services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/demo/{role}", response_model=AuthResponse)
async def demo_login(role: str, auth: AuthService = Depends(get_auth_service)):
    """
    Switch to a seeded demo persona without a password.

    ``patient``, ``doctor``, ``nurse`` and ``admin`` map to fixed users;
    anything else falls back to the patient.
    """
    try:
        user = auth.demo_user(role)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    return AuthResponse(user=user.to_public())


@router.post("/login", response_model=AuthResponse)
async def login(payload: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    try:
        user = auth.login(payload.username, payload.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=str(e))
    return AuthResponse(user=user.to_public())


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(payload: UserCreate, auth: AuthService = Depends(get_auth_service)):
    try:
        user = auth.register(payload)
    except DuplicateUsernameError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return AuthResponse(user=user.to_public())
