import json
from datetime import UTC, datetime
from typing import Any

from redis.asyncio import Redis

# Set by the application lifespan; None until connected
redis_client: Redis | None = None

REFRESH_TOKEN_PREFIX = "refresh_token"


def _client() -> Redis:
    if redis_client is None:
        raise RuntimeError("Redis client is not initialized")
    return redis_client


async def store_refresh_token(token_hash: str, user_id: str, ttl_seconds: int) -> None:
    """
    Store a refresh token in Redis with TTL.

    Args:
        token_hash: SHA-256 hash of the refresh token
        user_id: UUID of the user
        ttl_seconds: Time to live in seconds
    """
    key = f"{REFRESH_TOKEN_PREFIX}:{token_hash}"
    value = json.dumps({"user_id": user_id, "created_at": datetime.now(UTC).isoformat()})
    await _client().setex(key, ttl_seconds, value)


async def get_refresh_token(token_hash: str) -> dict[Any, Any] | None:
    """
    Retrieve refresh token data from Redis.

    Returns:
        Dictionary with user_id and created_at, or None if not found
    """
    data = await _client().get(f"{REFRESH_TOKEN_PREFIX}:{token_hash}")
    if data:
        result: dict[Any, Any] = json.loads(data)
        return result
    return None


async def revoke_refresh_token(token_hash: str) -> None:
    await _client().delete(f"{REFRESH_TOKEN_PREFIX}:{token_hash}")


async def revoke_all_user_tokens(user_id: str) -> int:
    """
    Revoke all refresh tokens for a specific user.

    Used after a password reset so that sessions opened with the old password
    stop refreshing.

    Returns:
        Number of tokens revoked
    """
    client = _client()
    cursor = 0
    revoked_count = 0

    while True:
        cursor, keys = await client.scan(cursor, match=f"{REFRESH_TOKEN_PREFIX}:*", count=100)

        for key in keys:
            data = await client.get(key)
            if data and json.loads(data).get("user_id") == user_id:
                await client.delete(key)
                revoked_count += 1

        if cursor == 0:
            break

    return revoked_count
