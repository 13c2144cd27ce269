"""Account management service."""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.mappers.account import AccountMapper
from storefront.models.account import AccountDetail, AccountForm, AccountUpdate
from storefront.services.accounts.exceptions import AccountNotFoundError

logger = structlog.get_logger(__name__)


class AccountService:
    """Service for account lookups, registration and updates."""

    def __init__(self, session: AsyncSession):
        self.accounts = AccountMapper(session)

    async def get_account(self, username: str) -> AccountDetail:
        account = await self.accounts.get_account_by_username(username)
        if account is None:
            raise AccountNotFoundError(username)
        return account

    async def authenticate(self, username: str, password: str) -> AccountDetail | None:
        """Return the account when the credentials match, otherwise None."""
        return await self.accounts.get_account_by_username_and_password(username, password)

    async def insert_account(self, form: AccountForm) -> None:
        """Create the account, profile and signon rows of a new user."""
        await self.accounts.insert_account(form)
        await self.accounts.insert_profile(form)
        await self.accounts.insert_signon(form)
        logger.info("Registered account", username=form.username)

    async def update_account(self, update: AccountUpdate) -> None:
        """Update account and profile; replace the password only if one is given."""
        await self.accounts.update_account(update)
        await self.accounts.update_profile(update)
        if update.replaces_password:
            assert update.password is not None
            await self.accounts.update_signon(update.username, update.password)
        logger.info("Updated account", username=update.username, password_changed=update.replaces_password)
