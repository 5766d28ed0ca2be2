"""authz-config - Plugin-backed authorization roles.

Configuration entities for roles whose membership is delegated to an
external authorization plugin, with their validation rules.
"""

__version__ = "0.1.0"

from authz_config.domain.entities import (
    CaseInsensitiveString,
    ConfigErrors,
    Configuration,
    ConfigurationProperty,
    PluginRoleConfig,
    RoleConfig,
    RolesConfig,
    RoleUser,
    ValidationContext,
)

__all__ = [
    "CaseInsensitiveString",
    "ConfigErrors",
    "Configuration",
    "ConfigurationProperty",
    "PluginRoleConfig",
    "RoleConfig",
    "RoleUser",
    "RolesConfig",
    "ValidationContext",
    "__version__",
]
