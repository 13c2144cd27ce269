"""Account management."""

from storefront.services.accounts.account_service import AccountService
from storefront.services.accounts.exceptions import AccountNotFoundError

__all__ = ["AccountNotFoundError", "AccountService"]
