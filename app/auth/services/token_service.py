from app.core import redis as redis_module
from app.core import security
from app.core.config import settings


class TokenService:
    """Keeps track of issued refresh tokens in Redis, stored by hash."""

    async def store_refresh_token(self, token: str, user_id: str) -> None:
        ttl_seconds = settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60
        await redis_module.store_refresh_token(security.hash_token(token), user_id, ttl_seconds)

    async def validate_refresh_token(self, token: str) -> dict | None:
        """Return the stored token data, or None if the token was revoked or expired"""
        return await redis_module.get_refresh_token(security.hash_token(token))

    async def revoke_refresh_token(self, token: str) -> None:
        await redis_module.revoke_refresh_token(security.hash_token(token))

    async def revoke_user_sessions(self, user_id: str) -> int:
        return await redis_module.revoke_all_user_tokens(user_id)


token_service = TokenService()
