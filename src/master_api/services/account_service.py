"""Reference account service holding accounts in memory."""

import asyncio
import logging
from datetime import datetime, timezone

from argon2 import PasswordHasher
from argon2 import exceptions as argon_exc

from master_api.entities import UserAccount
from master_api.errors import AccountNotClosedError, InvalidCredentialsError

logger = logging.getLogger(__name__)

_ph = PasswordHasher()


def hash_password(password: str) -> str:
    return _ph.hash(password)


def verify_password(password: str, stored_hash: str) -> bool:
    try:
        return _ph.verify(stored_hash, password)
    except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
        return False


class InMemoryAccountService:
    """In-memory implementation of the AccountService protocol."""

    def __init__(self, accounts: list[UserAccount] | None = None) -> None:
        self._accounts = {account.username.lower(): account for account in accounts or []}
        self._lock = asyncio.Lock()

    @classmethod
    def create(cls) -> "InMemoryAccountService":
        return cls()

    def register(self, username: str, password: str, closed: bool = False) -> UserAccount:
        """Add an account. Used to seed the store and by tests."""
        account = UserAccount(
            username=username,
            password_hash=hash_password(password),
            closed=closed,
            closed_at=datetime.now(timezone.utc) if closed else None,
        )
        self._accounts[username.lower()] = account
        return account

    def get(self, username: str) -> UserAccount | None:
        return self._accounts.get(username.lower())

    async def reopen_account(self, username: str, password: str) -> None:
        async with self._lock:
            account = self._authenticate(username, password)
            if not account.closed:
                raise AccountNotClosedError(account.username)
            account.closed = False
            account.closed_at = None
        logger.info("Account %s reopened", account.username)

    def _authenticate(self, username: str, password: str) -> UserAccount:
        account = self._accounts.get(username.lower())
        if account is None or not verify_password(password, account.password_hash):
            raise InvalidCredentialsError()
        return account
