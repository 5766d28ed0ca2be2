"""Domain services for authz-config.

Services contain rules that don't naturally fit within a single entity.
"""

from authz_config.domain.services.name_validator import (
    DEFAULT_MAX_LENGTH,
    NameTypeValidator,
    get_name_validator,
)

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "NameTypeValidator",
    "get_name_validator",
]
