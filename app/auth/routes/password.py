import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.auth.models.user import User
from app.auth.schemas.auth import MessageResponse, PasswordResetConfirm, PasswordResetRequest
from app.auth.services.email_service import build_password_reset_email, get_email_service
from app.auth.services.token_service import token_service
from app.core import security
from app.core.datetime_utils import ensure_utc, utcnow
from app.core.rate_limit import limiter
from app.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()

GENERIC_RESET_MESSAGE = "If an account with that email exists, a password reset link has been sent"


@router.post("/forgot", response_model=MessageResponse)
@limiter.limit("3/minute")
async def request_password_reset(
    request: Request,
    reset_request: PasswordResetRequest,
    db: Session = Depends(get_db),
) -> MessageResponse:
    """Issue a reset token. The response does not reveal whether the email is registered."""
    user = db.query(User).filter(User.email == reset_request.email.lower()).first()

    if not user or not user.is_active:
        return MessageResponse(message=GENERIC_RESET_MESSAGE)

    raw_token, hashed_token, expiry = security.generate_reset_token()

    user.password_reset_token = hashed_token
    user.password_reset_token_expires = expiry
    db.commit()

    email_message = build_password_reset_email(name=user.name, email=user.email, token=raw_token)
    sent = await get_email_service().send_email(email_message)
    if not sent:
        logger.error(f"Password reset email for user {user.id} was not delivered")

    return MessageResponse(message=GENERIC_RESET_MESSAGE)


@router.post("/reset", response_model=MessageResponse)
@limiter.limit("5/minute")
async def reset_password(
    request: Request, data: PasswordResetConfirm, db: Session = Depends(get_db)
) -> MessageResponse:
    hashed_token = security.hash_token(data.token)

    user = db.query(User).filter(User.password_reset_token == hashed_token).first()

    if not user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid or expired password reset token",
        )

    expires = user.password_reset_token_expires
    if expires is None or ensure_utc(expires) < utcnow():
        user.password_reset_token = None
        user.password_reset_token_expires = None
        db.commit()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Password reset token has expired",
        )

    password_error = security.validate_password(data.new_password)
    if password_error:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=password_error,
        )

    user.hashed_password = security.get_password_hash(data.new_password)
    user.password_reset_token = None
    user.password_reset_token_expires = None
    db.commit()

    try:
        revoked = await token_service.revoke_user_sessions(str(user.id))
        logger.info(f"Revoked {revoked} sessions after password reset for user {user.id}")
    except Exception:
        logger.warning("redis_unavailable_during_password_reset", extra={"user_id": str(user.id)})

    return MessageResponse(message="Password has been reset")
