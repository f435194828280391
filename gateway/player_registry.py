import logging
import threading
from typing import Dict, List, Optional, Tuple

import redis

from .exceptions import (
    DuplicateIdentity,
    InvalidTarget,
    CapacityExceeded,
    NotFound,
    LimitOutOfRange,
)
from .models import Player, Score, GameSession, PlayerInfo, PlayerRecord
from .password_generator import generate_password, DEFAULT_LENGTH
from .player_server_client import PlayerServerClient, parse_server_url
from shared.events import (
    Event,
    EventType,
    player_registered_event,
    player_unregistered_event,
    state_changed_event,
    max_users_changed_event,
)
from shared.pubsub import EventPublisher

logger = logging.getLogger(__name__)


class PlayerRegistry:
    """
    Owns every registered player and their game session:
    - Register/unregister players under a max-user limit
    - Pause, resume and reset game sessions
    - Serve consistent snapshots for info, leaderboard and CSV export

    All mutations of the player set and of the limit happen under one lock,
    so the uniqueness and capacity checks are atomic with the insertion.
    Events are published after the lock is released.
    """

    def __init__(
        self,
        max_number_of_users: int = 3,
        publisher: Optional[EventPublisher] = None,
        server_client: Optional[PlayerServerClient] = None,
        password_length: int = DEFAULT_LENGTH,
        hash_method: str = 'scrypt'
    ):
        self._sessions: Dict[str, GameSession] = {}
        self._lock = threading.RLock()
        self._max_number_of_users = max_number_of_users
        self.publisher = publisher
        self.server_client = server_client or PlayerServerClient(enabled=False)
        self.password_length = password_length
        self.hash_method = hash_method

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def _get_session(self, email: Optional[str]) -> GameSession:
        session = self._sessions.get(email)
        if session is None:
            raise NotFound(email)
        return session

    def _publish(self, event: Event):
        if not self.publisher:
            return
        try:
            self.publisher.publish_player_event(event)
        except redis.exceptions.RedisError as e:
            logger.error(f"Failed to publish {event.to_dict()['type']} for {event.email}: {e}")

    # ==================== Registration ====================

    def register(
        self,
        email: str,
        pseudo: str,
        server_url: str,
        score: int = None
    ) -> Tuple[Player, str]:
        """
        Register a new player and open their game session.

        Returns:
            (player, password) - the clear password is only available here
        """
        url = parse_server_url(server_url)
        if url is None:
            logger.warning(f"Rejected registration of {email}: invalid server URL {server_url!r}")
            raise InvalidTarget(server_url)

        # Hashing is slow, keep it out of the critical section
        password = generate_password(self.password_length)
        player = Player(email, pseudo, password, hash_method=self.hash_method)

        with self._lock:
            if email in self._sessions:
                logger.warning(f"Rejected registration of {email}: already registered")
                raise DuplicateIdentity(email)
            if len(self._sessions) >= self._max_number_of_users:
                logger.warning(
                    f"Rejected registration of {email}: limit of {self._max_number_of_users} reached"
                )
                raise CapacityExceeded(self._max_number_of_users)

            session = GameSession(
                player=player,
                server_url=url,
                score=Score(score if score is not None else 0)
            )
            self._sessions[email] = session
            initial_score = session.score.value

        logger.info(f"Registered player {email} ({pseudo}) on {url}")
        self._publish(player_registered_event(email, pseudo, url, initial_score))
        return player, password

    def unregister(self, email: str, removed_by_admin: bool = False) -> None:
        """Remove a player and their game session."""
        with self._lock:
            self._get_session(email)
            del self._sessions[email]

        logger.info(f"Unregistered player {email}{' by admin' if removed_by_admin else ''}")
        self._publish(player_unregistered_event(email, removed_by_admin))

    def check_credentials(self, email: str, password: str) -> bool:
        """Check a player's password. Unknown emails never authenticate."""
        with self._lock:
            session = self._sessions.get(email)
        if session is None:
            return False
        return session.player.check_password(password)

    def is_registered(self, email: str) -> bool:
        with self._lock:
            return email in self._sessions

    # ==================== Session lifecycle ====================

    def _transition(self, email: str, action: str, event_type: EventType) -> GameSession:
        with self._lock:
            session = self._get_session(email)
            old_state = session.state.value
            new_state = session.lifecycle.transition(action)
            if action == 'reset':
                session.score.reset()

        logger.info(f"{action.capitalize()} game of {email}: {old_state} -> {new_state.value}")
        self._publish(state_changed_event(email, event_type, old_state, new_state.value))
        return session

    def pause(self, email: str) -> None:
        self._transition(email, 'pause', EventType.PLAYER_PAUSED)

    def resume(self, email: str) -> None:
        self._transition(email, 'resume', EventType.PLAYER_RESUMED)

    def reset(self, email: str, cause: str = 'player request') -> None:
        """Reset score and session state, then tell the player's server."""
        session = self._transition(email, 'reset', EventType.PLAYER_RESET)
        self.server_client.notify_reset(session.server_url, cause)

    # ==================== Snapshots ====================

    def get_player_info(self, email: str) -> PlayerInfo:
        with self._lock:
            return self._get_session(email).info()

    def leaderboard(self) -> List[PlayerInfo]:
        """All players, best score first; ties keep registration order."""
        with self._lock:
            infos = [s.info() for s in self._sessions.values()]
        return sorted(infos, key=lambda info: info.score, reverse=True)

    def records(self) -> List[PlayerRecord]:
        """All players in registration order."""
        with self._lock:
            return [s.record() for s in self._sessions.values()]

    def bulk_import(self, records: List[PlayerRecord]) -> int:
        """
        Accept a batch of player rows.

        The rows are read and counted but not applied: whether an import
        should create or update players is undecided.
        """
        logger.info(f"Received {len(records)} player row(s) for import; registry left unchanged")
        return len(records)

    # ==================== Max number of users ====================

    @property
    def max_number_of_users(self) -> int:
        with self._lock:
            return self._max_number_of_users

    def _set_max_number_of_users(self, delta: int) -> int:
        with self._lock:
            old_limit = self._max_number_of_users
            new_limit = old_limit + delta
            if new_limit < 0:
                logger.warning(f"Refused to set max number of users to {new_limit}")
                raise LimitOutOfRange(old_limit, new_limit)
            self._max_number_of_users = new_limit

        logger.info(f"Max number of users changed: {old_limit} -> {new_limit}")
        self._publish(max_users_changed_event(old_limit, new_limit))
        return new_limit

    def increase_max_number_of_users(self) -> int:
        return self._set_max_number_of_users(1)

    def decrease_max_number_of_users(self) -> int:
        return self._set_max_number_of_users(-1)
