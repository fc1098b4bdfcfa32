"""User account domain entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class UserAccount:
    """A login account as held by the account store.

    Attributes:
        username: Unique login name
        password_hash: Argon2 hash of the password
        closed: Whether the account has been closed by its owner
        closed_at: When the account was closed, if it is closed
    """

    username: str
    password_hash: str
    closed: bool = False
    closed_at: datetime | None = None
