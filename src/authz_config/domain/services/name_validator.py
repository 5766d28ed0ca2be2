"""Name validation for configuration identifiers.

Role names, auth config ids and similar identifiers share one lexical rule:
- Alphanumeric characters, underscores, hyphens and periods
- Must not start with a period
- At most 255 characters (configurable)
"""

import re

from authz_config.core.config import get_settings
from authz_config.domain.entities.case_insensitive_string import CaseInsensitiveString

NAME_TYPE_PATTERN = re.compile(r"[a-zA-Z0-9_\-][a-zA-Z0-9_\-.]*")
DEFAULT_MAX_LENGTH = 255


class NameTypeValidator:
    """Checks identifiers against the configuration name rule."""

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        self.max_length = max_length

    def is_name_valid(self, name: object) -> bool:
        """Check if a name is a legal identifier.

        Args:
            name: The name to check. ``str()`` is applied to non-string
                identifiers such as case-insensitive names.

        Returns:
            True if the name is legal, False otherwise (including None).
        """
        if name is None:
            return False
        if isinstance(name, CaseInsensitiveString) and name.value is None:
            return False
        text = str(name)
        return len(text) <= self.max_length and NAME_TYPE_PATTERN.fullmatch(text) is not None

    def is_name_invalid(self, name: object) -> bool:
        return not self.is_name_valid(name)

    def error_message(self, label: str, value: object) -> str:
        """Human-readable message for an invalid identifier.

        Args:
            label: What the identifier names (e.g. 'role name').
            value: The rejected value.
        """
        return (
            f"Invalid {label} name '{value}'. This must be alphanumeric and can contain "
            f"underscores, hyphens and periods (however, it cannot start with a period). "
            f"The maximum allowed length is {self.max_length} characters."
        )


def get_name_validator() -> NameTypeValidator:
    """Validator honouring the configured maximum name length."""
    return NameTypeValidator(max_length=get_settings().name_max_length)
