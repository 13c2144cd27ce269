"""Account, Profile and Signon database models."""

from sqlmodel import Field, SQLModel


class AccountBase(SQLModel):
    """Contact fields of a customer account."""

    username: str = Field(primary_key=True, max_length=80)
    email: str = Field(max_length=80)
    first_name: str = Field(max_length=80)
    last_name: str = Field(max_length=80)
    status: str | None = Field(default=None, max_length=2)
    address1: str = Field(max_length=80)
    address2: str | None = Field(default=None, max_length=40)
    city: str = Field(max_length=80)
    state: str = Field(max_length=80)
    postal_code: str = Field(max_length=20)
    country: str = Field(max_length=20)
    phone: str = Field(max_length=80)


class Account(AccountBase, table=True):
    __tablename__ = "account"


class ProfileBase(SQLModel):
    """Storefront preferences of an account."""

    language_preference: str = Field(default="english", max_length=80)
    favourite_category_id: str | None = Field(default=None, max_length=30)
    list_option: bool = False
    banner_option: bool = False


class Profile(ProfileBase, table=True):
    __tablename__ = "profile"

    username: str = Field(foreign_key="account.username", primary_key=True, max_length=80)


class Signon(SQLModel, table=True):
    """Login credentials of an account."""

    __tablename__ = "signon"

    username: str = Field(foreign_key="account.username", primary_key=True, max_length=80)
    password: str = Field(max_length=80)


class AccountDetail(AccountBase, ProfileBase):
    """Account joined with its profile, as returned by account lookups."""


class AccountForm(AccountDetail):
    """Data required to register a new account."""

    password: str


class AccountUpdate(AccountDetail):
    """Data for updating an existing account.

    Account and profile fields are always written. The password is written
    only when a non-empty replacement is supplied.
    """

    password: str | None = None

    @property
    def replaces_password(self) -> bool:
        return bool(self.password)
