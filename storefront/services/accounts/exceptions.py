"""Account domain exceptions."""

from storefront.services.exceptions import NotFoundError


class AccountNotFoundError(NotFoundError):
    """Account not found."""

    pass
