# services/user_management/controllers/auth_service.py
import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.user_management.models.users import User, UserStatus
from services.user_management.schemas.users import (
    UserLoginRequest,
    UserLoginResponse,
    CurrentUserResponse,
    UserOut
)
from shared.auth import (
    verify_password,
    create_access_token,
    get_current_user,
    set_token_cookie,
    clear_token_cookie
)
from shared.db import get_db
from shared.errors import AuthenticationError, AuthorizationError
from shared.schemas import ActionOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


# --- LOGIN ---
@router.post("/login", response_model=UserLoginResponse)
async def login(
    payload: UserLoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    result = await db.execute(select(User).where(User.email == payload.email.lower()))
    user = result.scalars().first()

    if not user or not verify_password(payload.password, user.hashed_password):
        logger.warning("Failed login attempt for %s", payload.email)
        raise AuthenticationError("Invalid email or password")

    if user.status == UserStatus.SUSPENDED:
        logger.warning("Suspended account %s attempted to log in", user.email)
        raise AuthorizationError("Your account has been suspended. Contact admin.")

    token = create_access_token({"sub": user.id, "role": user.role.value})
    set_token_cookie(response, token)

    return {"user": UserOut.model_validate(user), "token": token}


# --- CURRENT USER ---
@router.get("/me", response_model=CurrentUserResponse)
async def me(current_user: User = Depends(get_current_user)):
    return {"user": UserOut.model_validate(current_user)}


# --- LOGOUT ---
@router.post("/logout", response_model=ActionOut)
async def logout(response: Response):
    clear_token_cookie(response)
    return {"message": "Logged out"}
