"""Role capability shared by every role variant.

A role is a named group of users used for authorization decisions. The
variants (plugin-backed, plain user list) implement the ``Role`` protocol;
the behaviour common to all of them lives in the free functions below and
works only through that protocol.
"""

from typing import Protocol, runtime_checkable

from authz_config.domain.entities.case_insensitive_string import CaseInsensitiveString
from authz_config.domain.entities.config_errors import ConfigErrors
from authz_config.domain.entities.role_user import RoleUser, users
from authz_config.domain.entities.validation_context import ValidationContext
from authz_config.domain.services.name_validator import get_name_validator

NAME = "name"
USERS = "users"
DUPLICATE_ROLE_MESSAGE = "Role names should be unique. Role with the same name exists."


@runtime_checkable
class Role(Protocol):
    """Interface implemented by every role variant."""

    @property
    def name(self) -> CaseInsensitiveString | None: ...

    @property
    def errors(self) -> ConfigErrors: ...

    def add_error(self, field_name: str, message: str) -> None: ...

    def do_get_users(self) -> set[RoleUser]: ...

    def do_set_users(self, members: "set[RoleUser] | list[RoleUser]") -> None: ...

    def validate(self, validation_context: ValidationContext) -> None: ...


def validate_role(role: Role, validation_context: ValidationContext) -> None:
    """Checks common to every role variant.

    Reports an ill-formed role name under ``name`` and blank member names
    under ``users``. Errors are appended to the role; nothing is raised.

    Args:
        role: The role to check.
        validation_context: Context of the current validation pass.
    """
    validator = get_name_validator()
    if validator.is_name_invalid(role.name):
        role.add_error(NAME, validator.error_message("role name", role.name))

    for member in role.do_get_users():
        if member.name is None or member.name.is_blank():
            role.add_error(USERS, f"Role '{role.name}' has a member with a blank user name.")


def validate_name_uniqueness(
    role: Role, name_to_role: dict[CaseInsensitiveString | None, Role]
) -> None:
    """Record ``role`` in ``name_to_role``, flagging a name clash on both roles.

    Args:
        role: The role being checked.
        name_to_role: Roles seen so far in this pass, keyed by name.
    """
    existing = name_to_role.get(role.name)
    if existing is None:
        name_to_role[role.name] = role
        return
    role.add_error(NAME, DUPLICATE_ROLE_MESSAGE)
    existing.add_error(NAME, DUPLICATE_ROLE_MESSAGE)


def get_users(role: Role) -> list[RoleUser]:
    """Members of ``role`` sorted by name."""
    return sorted(role.do_get_users(), key=lambda member: str(member.name).lower())


def add_user(role: Role, member: "RoleUser | str") -> None:
    members = set(role.do_get_users())
    members.update(users([member]))
    role.do_set_users(members)


def remove_user(role: Role, member: "RoleUser | str") -> None:
    members = set(role.do_get_users())
    members.difference_update(users([member]))
    role.do_set_users(members)


def has_member(role: Role, user_name: "CaseInsensitiveString | str") -> bool:
    return bool(users([str(user_name)]) & role.do_get_users())
