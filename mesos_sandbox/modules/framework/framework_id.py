from typing import Optional, Protocol


class FrameworkIDProvider(Protocol):
    """Protocol for framework identity sources."""

    async def fetch(self) -> Optional[str]:
        """
        Get the currently registered framework ID.

        Returns:
            Framework ID, or None if no framework is registered yet
        """
        ...


class RedisFrameworkIDStore:
    def __init__(self, redis_client, key: str = "mesos-sandbox:ha:framework_id"):
        """
        Initialize framework ID store.

        The scheduler writes the key when it registers with the master; this
        store only reads it.

        Args:
            redis_client: Async Redis client (decode_responses=True)
            key: Registry key holding the framework ID
        """
        self.redis = redis_client
        self.key = key

    async def fetch(self) -> Optional[str]:
        """Get the registered framework ID, or None if the key is missing or empty."""
        framework_id = await self.redis.get(self.key)
        return framework_id or None
