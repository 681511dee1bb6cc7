"""Redis client lifecycle for the conversation store."""

from redis.asyncio import ConnectionPool, Redis

from concierge.core.config import settings

# Redis connection pool
redis_pool: ConnectionPool | None = None
redis_client: Redis | None = None


async def init_redis() -> Redis:
    """Create the connection pool and verify the server answers."""
    global redis_pool, redis_client

    redis_pool = ConnectionPool.from_url(
        str(settings.REDIS_URL),
        max_connections=settings.REDIS_MAX_CONNECTIONS,
        decode_responses=True,
    )
    redis_client = Redis(connection_pool=redis_pool)

    await redis_client.ping()

    return redis_client


async def get_redis() -> Redis:
    """Get Redis client instance."""
    if redis_client is None:
        return await init_redis()
    return redis_client


async def close_redis() -> None:
    """Close Redis connections."""
    global redis_pool, redis_client

    if redis_client:
        await redis_client.aclose()
        redis_client = None

    if redis_pool:
        await redis_pool.disconnect()
        redis_pool = None
