"""Account, profile and signon row mapper."""

from typing import Any

from sqlalchemy import update
from sqlmodel import select

from storefront.mappers.base import Mapper
from storefront.models.account import (
    Account,
    AccountBase,
    AccountDetail,
    AccountForm,
    Profile,
    ProfileBase,
    Signon,
)

ACCOUNT_FIELDS = frozenset(AccountBase.model_fields)
PROFILE_FIELDS = frozenset(ProfileBase.model_fields)


class AccountMapper(Mapper):
    async def get_account_by_username(self, username: str) -> AccountDetail | None:
        statement = self._select_detail().where(Account.username == username)
        return await self._fetch_detail(statement, f"get account {username!r}")

    async def get_account_by_username_and_password(self, username: str, password: str) -> AccountDetail | None:
        statement = (
            self._select_detail()
            .join(Signon, Signon.username == Account.username)  # type: ignore[arg-type]
            .where(Account.username == username, Signon.password == password)
        )
        return await self._fetch_detail(statement, f"get account {username!r} by credentials")

    async def insert_account(self, account: AccountDetail) -> None:
        row = Account(**account.model_dump(include=ACCOUNT_FIELDS))
        await self._insert(row, f"insert account {account.username!r}")

    async def insert_profile(self, account: AccountDetail) -> None:
        row = Profile(username=account.username, **account.model_dump(include=PROFILE_FIELDS))
        await self._insert(row, f"insert profile {account.username!r}")

    async def insert_signon(self, account: AccountForm) -> None:
        row = Signon(username=account.username, password=account.password)
        await self._insert(row, f"insert signon {account.username!r}")

    async def update_account(self, account: AccountDetail) -> None:
        values = account.model_dump(include=ACCOUNT_FIELDS - {"username"})
        statement = (
            update(Account)
            .where(Account.username == account.username)  # type: ignore[arg-type]
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        await self._update(statement, f"update account {account.username!r}")

    async def update_profile(self, account: AccountDetail) -> None:
        statement = (
            update(Profile)
            .where(Profile.username == account.username)  # type: ignore[arg-type]
            .values(**account.model_dump(include=PROFILE_FIELDS))
            .execution_options(synchronize_session=False)
        )
        await self._update(statement, f"update profile {account.username!r}")

    async def update_signon(self, username: str, password: str) -> None:
        statement = (
            update(Signon)
            .where(Signon.username == username)  # type: ignore[arg-type]
            .values(password=password)
            .execution_options(synchronize_session=False)
        )
        await self._update(statement, f"update signon {username!r}")

    @staticmethod
    def _select_detail() -> Any:
        return select(Account, Profile).join(Profile, Profile.username == Account.username)  # type: ignore[arg-type]

    async def _fetch_detail(self, statement: Any, operation: str) -> AccountDetail | None:
        result = await self._execute(statement, operation)
        row = result.first()
        if row is None:
            return None
        account, profile = row
        return AccountDetail.model_validate(account, update=profile.model_dump(include=PROFILE_FIELDS))
