from enum import Enum
from dataclasses import dataclass
from datetime import datetime, timezone
import json


class EventType(str, Enum):
    # Player lifecycle
    PLAYER_REGISTERED = "player.registered"
    PLAYER_UNREGISTERED = "player.unregistered"

    # Session state
    PLAYER_PAUSED = "player.paused"
    PLAYER_RESUMED = "player.resumed"
    PLAYER_RESET = "player.reset"

    # Administration
    MAX_USERS_CHANGED = "admin.max_users_changed"


@dataclass
class Event:
    type: EventType
    email: str = None
    timestamp: str = None
    data: dict = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        if self.data is None:
            self.data = {}

    def to_dict(self) -> dict:
        return {
            "type": self.type.value if isinstance(self.type, EventType) else self.type,
            "email": self.email,
            "timestamp": self.timestamp,
            "data": self.data
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def player_registered_event(email: str, pseudo: str, server_url: str, score: int) -> Event:
    return Event(
        type=EventType.PLAYER_REGISTERED,
        email=email,
        data={
            "pseudo": pseudo,
            "server_url": server_url,
            "score": score
        }
    )


def player_unregistered_event(email: str, removed_by_admin: bool = False) -> Event:
    return Event(
        type=EventType.PLAYER_UNREGISTERED,
        email=email,
        data={"removed_by_admin": removed_by_admin}
    )


def state_changed_event(email: str, event_type: EventType, from_state: str, to_state: str) -> Event:
    return Event(
        type=event_type,
        email=email,
        data={
            "from_state": from_state,
            "to_state": to_state
        }
    )


def max_users_changed_event(old_limit: int, new_limit: int) -> Event:
    return Event(
        type=EventType.MAX_USERS_CHANGED,
        data={
            "old": old_limit,
            "new": new_limit
        }
    )
