import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from app.auth.dependencies import (
    get_current_user,
    get_refresh_token_from_cookie,
    get_validated_token_payload,
    load_user,
)
from app.auth.models.user import User, UserType
from app.auth.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RefreshResponse,
    RegisterRequest,
)
from app.auth.schemas.user import UserResponse
from app.auth.services.token_service import token_service
from app.core import security
from app.core.exceptions import ConflictError, ForbiddenError
from app.core.rate_limit import limiter
from app.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


def _token_data(user: User) -> dict:
    return {"sub": str(user.id), "email": user.email, "role": user.user_type.value}


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")
async def register(
    request: Request,
    data: RegisterRequest,
    db: Session = Depends(get_db),
) -> UserResponse:
    if data.user_type == UserType.ADMIN:
        raise ForbiddenError("Administrator accounts cannot be self-registered")

    password_error = security.validate_password(data.password)
    if password_error:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=password_error,
        )

    email = data.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise ConflictError("A user with this email already exists", resource="user")

    user = User(
        email=email,
        username=data.username.strip(),
        name=data.name.strip(),
        hashed_password=security.get_password_hash(data.password),
        user_type=data.user_type,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Registered {user.user_type.value} account {user.id}")
    return UserResponse.from_user(user)


@router.post("/login", response_model=LoginResponse)
@limiter.limit("5/minute")
async def login(
    request: Request,
    credentials: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> LoginResponse:
    user = db.query(User).filter(User.email == credentials.email.lower()).first()

    if not user or not security.verify_password(credentials.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account is inactive")

    access_token = security.create_access_token(_token_data(user))
    refresh_token = security.create_refresh_token(_token_data(user))

    try:
        await token_service.store_refresh_token(refresh_token, str(user.id))
    except Exception:
        logger.warning("redis_unavailable_during_login", extra={"user_id": str(user.id)})

    security.set_auth_cookies(response, access_token, refresh_token)

    return LoginResponse(user=UserResponse.from_user(user), access_token=access_token)


@router.post("/refresh", response_model=RefreshResponse)
async def refresh_token(
    response: Response,
    refresh_token: str = Depends(get_refresh_token_from_cookie),
    db: Session = Depends(get_db),
) -> RefreshResponse:
    payload = await get_validated_token_payload(refresh_token, expected_type="refresh")

    try:
        token_data = await token_service.validate_refresh_token(refresh_token)
    except Exception:
        logger.warning("redis_unavailable_during_token_validation")
        token_data = None
    if token_data is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token was revoked or has expired",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = load_user(db, payload.get("sub"))
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    # Rotation: the presented refresh token is single use
    try:
        await token_service.revoke_refresh_token(refresh_token)
    except Exception:
        logger.warning("redis_unavailable_during_revoke", extra={"user_id": str(user.id)})

    new_access_token = security.create_access_token(_token_data(user))
    new_refresh_token = security.create_refresh_token(_token_data(user))

    try:
        await token_service.store_refresh_token(new_refresh_token, str(user.id))
    except Exception:
        logger.warning("redis_unavailable_during_refresh", extra={"user_id": str(user.id)})

    security.set_auth_cookies(response, new_access_token, new_refresh_token)

    return RefreshResponse()


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    current_user: User = Depends(get_current_user),
) -> MessageResponse:
    refresh_token = request.cookies.get("refresh_token")
    if refresh_token:
        try:
            await token_service.revoke_refresh_token(refresh_token)
        except Exception:
            logger.warning("redis_unavailable_during_logout")

    security.clear_auth_cookies(response)

    return MessageResponse(message="Successfully logged out")


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    return UserResponse.from_user(current_user)
