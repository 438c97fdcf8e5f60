# vasstra/schemas/user.py
from typing import Literal

from vasstra.schemas.common import CamelModel

UserRole = Literal["user", "admin"]


class UserAddress(CamelModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None


class SavedAddress(UserAddress):
    """
    Entry of the address book shown at checkout.
    """

    label: str
    phone: str | None = None
    is_default: bool = False


class AuthUser(CamelModel):
    """
    Snapshot of the signed-in user persisted next to the session token.
    """

    id: str
    email: str
    name: str
    role: UserRole = "user"
    phone: str | None = None
    address: UserAddress | None = None
    addresses: list[SavedAddress] | None = None
    profile_image: str | None = None
    created_at: str | None = None
