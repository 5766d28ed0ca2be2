"""Plugin role entity.

A plugin role delegates its membership and permissions to an external
authorization plugin. It carries the properties forwarded to that plugin
and the id of the auth config that names the plugin instance.
"""

from collections.abc import Iterable
from typing import Any

from authz_config.core.configuration.property_builder import ConfigurationPropertyBuilder
from authz_config.domain.entities.case_insensitive_string import (
    CaseInsensitiveString,
    to_case_insensitive,
)
from authz_config.domain.entities.config_errors import ConfigErrors
from authz_config.domain.entities.configuration import Configuration
from authz_config.domain.entities.configuration_property import ConfigurationProperty
from authz_config.domain.entities.role import validate_role
from authz_config.domain.entities.role_user import RoleUser, users
from authz_config.domain.entities.validation_context import ValidationContext
from authz_config.domain.services.name_validator import get_name_validator

AUTH_CONFIG_ID = "authConfigId"


class PluginRoleConfig(Configuration):
    """Role whose membership is resolved by an authorization plugin.

    Setters accept anything; problems surface only through ``errors`` after
    ``validate``. Equality covers the properties, name and auth config id;
    members and errors are operational state and are ignored.

    Attributes:
        name: Case-insensitive role name.
        auth_config_id: Id of the authorization plugin configuration.
    """

    def __init__(
        self,
        name: "str | CaseInsensitiveString | None" = None,
        auth_config_id: str | None = None,
        *properties: ConfigurationProperty,
    ) -> None:
        super().__init__(*properties)
        self._errors = ConfigErrors()
        self._name = to_case_insensitive(name)
        self.auth_config_id = auth_config_id
        self._users: set[RoleUser] = set()

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
        """Append validation errors for this role.

        Runs the checks shared by all roles, then checks the auth config id.
        Errors accumulate across calls; nothing is cleared first.

        Args:
            validation_context: Context of the current validation pass.
        """
        validate_role(self, validation_context)
        validator = get_name_validator()
        if not validator.is_name_valid(self.auth_config_id):
            self.add_error(
                AUTH_CONFIG_ID,
                validator.error_message("plugin role authConfigId", self.auth_config_id),
            )

    def do_get_users(self) -> set[RoleUser]:
        return self._users

    def do_set_users(self, members: Iterable["RoleUser | str"] | None) -> None:
        self._users = users(members)

    def add_configurations(self, configurations: Iterable[ConfigurationProperty]) -> None:
        """Append properties as plain values.

        Each property is rebuilt from its key and plain value only; any
        encrypted value, secure flag and errors are dropped.

        Args:
            configurations: Properties to re-attach to this role.
        """
        builder = ConfigurationPropertyBuilder()
        for prop in configurations:
            self.add(builder.create(prop.key, prop.value, None, False))

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, PluginRoleConfig):
            return False
        if not super().__eq__(other):
            return False
        return self._name == other._name and self.auth_config_id == other.auth_config_id

    def __hash__(self) -> int:
        return hash((super().__hash__(), self._name, self.auth_config_id))

    def __repr__(self) -> str:
        return f"PluginRoleConfig{{name={self._name}, authConfigId='{self.auth_config_id}'}}"

    __str__ = __repr__
