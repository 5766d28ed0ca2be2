"""Domain entities for authz-config.

Entities are plain Python classes describing roles and the configuration
properties forwarded to authorization plugins.
"""

from authz_config.domain.entities.case_insensitive_string import CaseInsensitiveString
from authz_config.domain.entities.config_errors import ConfigErrors
from authz_config.domain.entities.configuration import Configuration
from authz_config.domain.entities.configuration_property import ConfigurationProperty
from authz_config.domain.entities.plugin_role import PluginRoleConfig
from authz_config.domain.entities.role import Role
from authz_config.domain.entities.role_config import RoleConfig
from authz_config.domain.entities.role_user import RoleUser
from authz_config.domain.entities.roles_config import RolesConfig
from authz_config.domain.entities.validation_context import ValidationContext

__all__ = [
    "CaseInsensitiveString",
    "ConfigErrors",
    "Configuration",
    "ConfigurationProperty",
    "PluginRoleConfig",
    "Role",
    "RoleConfig",
    "RoleUser",
    "RolesConfig",
    "ValidationContext",
]
