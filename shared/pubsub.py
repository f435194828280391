import logging
import redis
from .events import Event

logger = logging.getLogger(__name__)

GLOBAL_CHANNEL = "global:announcements"
EVENT_LOG_SIZE = 1000


class EventPublisher:
    """Publishes player lifecycle events to Redis channels."""

    def __init__(self, redis_client: redis.Redis):
        self.redis = redis_client

    @classmethod
    def from_url(cls, redis_url: str) -> "EventPublisher":
        client = redis.from_url(
            redis_url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5
        )
        return cls(client)

    def publish(self, channel: str, event: Event):
        self.redis.publish(channel, event.to_json())

    def publish_player_event(self, event: Event):
        self.publish(GLOBAL_CHANNEL, event)
        if event.email:
            self.publish(f"player:{event.email}:events", event)
            self.log_event(event.email, event)

    def log_event(self, email: str, event: Event):
        key = f"player:{email}:event_log"
        self.redis.lpush(key, event.to_json())
        self.redis.ltrim(key, 0, EVENT_LOG_SIZE - 1)

    def ping(self) -> bool:
        try:
            return bool(self.redis.ping())
        except redis.exceptions.RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False
