"""Users of an organization and their roles."""

from typing import Literal

from .realtime_session import U32, _WireModel

OrganizationRole = Literal["owner", "reader"]


class User(_WireModel):
    """An individual user within an organization."""

    object: str
    id: str
    name: str
    email: str
    role: OrganizationRole
    added_at: U32


class UserListResponse(_WireModel):
    object: str
    data: list[User]
    first_id: str
    last_id: str
    has_more: bool


class UserRoleUpdateRequest(_WireModel):
    """Request to change a user's role."""

    role: OrganizationRole


class UserDeleteResponse(_WireModel):
    object: str
    id: str
    deleted: bool