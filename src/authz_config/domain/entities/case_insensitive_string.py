"""Case-insensitive identifier used for role and user names."""

from functools import total_ordering
from typing import Any


@total_ordering
class CaseInsensitiveString:
    """String wrapper that compares and hashes ignoring case.

    The original spelling is kept and returned by ``str()``.
    """

    __slots__ = ("_value", "_lowered")

    def __init__(self, value: str) -> None:
        self._value = value
        self._lowered = value.lower() if value is not None else None

    @property
    def value(self) -> str:
        return self._value

    def to_lower(self) -> str | None:
        return self._lowered

    def is_blank(self) -> bool:
        """True for a missing, empty or whitespace-only value."""
        return self._value is None or not self._value.strip()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CaseInsensitiveString):
            return NotImplemented
        return self._lowered == other._lowered

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, CaseInsensitiveString):
            return NotImplemented
        return (self._lowered or "") < (other._lowered or "")

    def __hash__(self) -> int:
        return hash(self._lowered)

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"CaseInsensitiveString({self._value!r})"


def to_case_insensitive(value: "str | CaseInsensitiveString | None") -> CaseInsensitiveString | None:
    """Wrap a plain string, passing ``None`` and wrapped values through."""
    if value is None or isinstance(value, CaseInsensitiveString):
        return value
    return CaseInsensitiveString(value)
