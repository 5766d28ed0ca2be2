"""Role collection of a configuration document.

Owns the checks that span roles, such as name uniqueness, and drives the
validation of each role in the collection.
"""

from collections.abc import Iterator

from authz_config.core.logging import get_logger
from authz_config.domain.entities.case_insensitive_string import (
    CaseInsensitiveString,
    to_case_insensitive,
)
from authz_config.domain.entities.config_errors import ConfigErrors
from authz_config.domain.entities.plugin_role import PluginRoleConfig
from authz_config.domain.entities.role import Role, validate_name_uniqueness
from authz_config.domain.entities.validation_context import ValidationContext

logger = get_logger(__name__)


class RolesConfig:
    """Ordered collection of roles of any variant."""

    def __init__(self, *roles: Role) -> None:
        self._roles: list[Role] = list(roles)

    def add(self, role: Role) -> None:
        self._roles.append(role)

    def remove(self, role: Role) -> None:
        self._roles.remove(role)

    def find_by_name(self, name: "str | CaseInsensitiveString") -> Role | None:
        wanted = to_case_insensitive(name)
        for role in self._roles:
            if role.name == wanted:
                return role
        return None

    def is_unique_role_name(self, name: "str | CaseInsensitiveString") -> bool:
        wanted = to_case_insensitive(name)
        return sum(1 for role in self._roles if role.name == wanted) <= 1

    def role_names(self) -> list[CaseInsensitiveString | None]:
        return [role.name for role in self._roles]

    def plugin_roles(self) -> list[PluginRoleConfig]:
        return [role for role in self._roles if isinstance(role, PluginRoleConfig)]

    def plugin_roles_for_auth_config(self, auth_config_id: str) -> list[PluginRoleConfig]:
        """Plugin roles backed by the given auth config."""
        return [role for role in self.plugin_roles() if role.auth_config_id == auth_config_id]

    def validate(self, validation_context: ValidationContext) -> None:
        """Validate name uniqueness across roles, then every role.

        Errors are appended to the individual roles.

        Args:
            validation_context: Context of the current validation pass.
        """
        name_to_role: dict[CaseInsensitiveString | None, Role] = {}
        for role in self._roles:
            validate_name_uniqueness(role, name_to_role)

        child_context = validation_context.with_roles(self).with_parent(self)
        for role in self._roles:
            role.validate(child_context)

        invalid = [str(role.name) for role in self._roles if not role.errors.is_empty()]
        if invalid:
            logger.info(
                "Role validation found errors",
                role_count=len(self._roles),
                invalid_roles=invalid,
            )
        else:
            logger.debug("Role validation passed", role_count=len(self._roles))

    def all_errors(self) -> ConfigErrors:
        """Errors of every role merged into one collection."""
        merged = ConfigErrors()
        for role in self._roles:
            merged.add_all(role.errors)
        return merged

    def has_errors(self) -> bool:
        return any(not role.errors.is_empty() for role in self._roles)

    def __iter__(self) -> Iterator[Role]:
        return iter(self._roles)

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, role: object) -> bool:
        return role in self._roles
