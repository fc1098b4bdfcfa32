"""Account service protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class AccountService(Protocol):
    """Protocol for the service owning user accounts."""

    async def reopen_account(self, username: str, password: str) -> None:
        """Reactivate a closed account after checking its credentials.

        Args:
            username: Account login name
            password: Account password

        Raises:
            InvalidCredentialsError: If the pair does not match an account
            AccountNotClosedError: If the account is not closed
        """
        ...
