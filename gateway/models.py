from dataclasses import dataclass, field
from werkzeug.security import generate_password_hash, check_password_hash

from shared.state_machine import SessionStateMachine, SessionState


class Player:
    """A registered player. Identity is the email; only a hash of the password is kept."""

    def __init__(self, email: str, pseudo: str, password: str, hash_method: str = 'scrypt'):
        self.email = email
        self.pseudo = pseudo
        self.password_hash = generate_password_hash(password, method=hash_method)

    def check_password(self, password: str) -> bool:
        if not password:
            return False
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f"<Player {self.email}>"


class Score:
    def __init__(self, value: int = 0):
        self.value = int(value)

    def reset(self):
        self.value = 0


@dataclass(frozen=True)
class PlayerInfo:
    email: str
    pseudo: str
    score: int
    state: str

    def to_dict(self) -> dict:
        return {
            'email': self.email,
            'pseudo': self.pseudo,
            'score': self.score,
            'state': self.state,
        }


@dataclass(frozen=True)
class PlayerRecord:
    """One row of the players table as exported to or imported from CSV."""
    email: str
    pseudo: str
    server_url: str
    score: int


@dataclass
class GameSession:
    """The gateway's record of a player's elevator game on a remote server."""
    player: Player
    server_url: str
    score: Score = field(default_factory=Score)
    lifecycle: SessionStateMachine = field(default_factory=SessionStateMachine)

    @property
    def email(self) -> str:
        return self.player.email

    @property
    def state(self) -> SessionState:
        return self.lifecycle.state

    def info(self) -> PlayerInfo:
        return PlayerInfo(
            email=self.player.email,
            pseudo=self.player.pseudo,
            score=self.score.value,
            state=self.lifecycle.state.value,
        )

    def record(self) -> PlayerRecord:
        return PlayerRecord(
            email=self.player.email,
            pseudo=self.player.pseudo,
            server_url=self.server_url,
            score=self.score.value,
        )
