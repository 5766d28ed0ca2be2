"""Role entity listing its members by user name."""

from collections.abc import Iterable
from typing import Any

from authz_config.domain.entities.case_insensitive_string import (
    CaseInsensitiveString,
    to_case_insensitive,
)
from authz_config.domain.entities.config_errors import ConfigErrors
from authz_config.domain.entities.role import validate_role
from authz_config.domain.entities.role_user import RoleUser, users
from authz_config.domain.entities.validation_context import ValidationContext


class RoleConfig:
    """Role whose members are enumerated in the configuration.

    Attributes:
        name: Case-insensitive role name.
    """

    def __init__(
        self,
        name: "str | CaseInsensitiveString | None" = None,
        *members: "RoleUser | str",
    ) -> None:
        self._errors = ConfigErrors()
        self._name = to_case_insensitive(name)
        self._users = users(members)

    @property
    def name(self) -> CaseInsensitiveString | None:
        return self._name

    @name.setter
    def name(self, value: "str | CaseInsensitiveString | None") -> None:
        self._name = to_case_insensitive(value)

    @property
    def errors(self) -> ConfigErrors:
        return self._errors

    def add_error(self, field_name: str, message: str) -> None:
        self._errors.add(field_name, message)

    def validate(self, validation_context: ValidationContext) -> None:
        validate_role(self, validation_context)

    def do_get_users(self) -> set[RoleUser]:
        return self._users

    def do_set_users(self, members: Iterable["RoleUser | str"] | None) -> None:
        self._users = users(members)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RoleConfig):
            return NotImplemented
        return self._name == other._name and self._users == other._users

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"RoleConfig{{name={self._name}, users={sorted(str(u) for u in self._users)}}}"
