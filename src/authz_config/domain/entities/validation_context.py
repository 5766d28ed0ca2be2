"""Validation context passed through a configuration validation pass."""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from authz_config.domain.entities.roles_config import RolesConfig


@dataclass(frozen=True)
class ValidationContext:
    """State shared by the entities validated in one pass.

    Roles treat the context as opaque and only pass it on; the owner of the
    role collection uses it for cross-role checks.

    Attributes:
        roles: The role collection being validated, if any.
        parent: The entity whose validation produced this context.
        previous: The context this one was derived from.
    """

    roles: "RolesConfig | None" = None
    parent: Any = None
    previous: "ValidationContext | None" = None

    def with_parent(self, parent: Any) -> "ValidationContext":
        """Child context for validating the entities owned by ``parent``."""
        return replace(self, parent=parent, previous=self)

    def with_roles(self, roles: "RolesConfig") -> "ValidationContext":
        return replace(self, roles=roles, previous=self)
