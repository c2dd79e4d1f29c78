# config/cache.py
from redis.asyncio import Redis, from_url


async def open_redis(url: str) -> Redis:
    client = from_url(
        url,
        decode_responses=False,  # repositories get raw bytes
        socket_keepalive=True,
        health_check_interval=30,
    )
    # Fail fast on startup if Redis is unreachable.
    await client.ping()
    return client
