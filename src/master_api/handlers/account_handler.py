"""HTTP handlers for account operations."""

from master_api.dto import HandlerResult, LoginRequest
from master_api.protocols import AccountService


class AccountHandler:
    """HTTP handlers for account operations.

    Reopening is anonymous: a user whose account is closed has no session,
    so the credentials in the request body are the only proof of identity.
    """

    def __init__(self, account_service: AccountService, login_redirect_url: str) -> None:
        """Initialize the account handler.

        Args:
            account_service: The account service for business logic (required).
            login_redirect_url: Where to send the user after a successful reopen.
        """
        self._accounts = account_service
        self._login_redirect_url = login_redirect_url

    async def reopen_account(self, request: LoginRequest) -> HandlerResult:
        """Handle POST /reopen requests.

        Errors from the account service propagate unchanged.

        Returns:
            Redirect to the login page
        """
        await self._accounts.reopen_account(request.username, request.password)
        return HandlerResult.redirect(self._login_redirect_url)
