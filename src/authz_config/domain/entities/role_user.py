"""Role member reference."""

from collections.abc import Iterable
from dataclasses import dataclass

from authz_config.domain.entities.case_insensitive_string import (
    CaseInsensitiveString,
    to_case_insensitive,
)


@dataclass(frozen=True)
class RoleUser:
    """A user named as a member of a role.

    Attributes:
        name: User name; compared ignoring case.
    """

    name: CaseInsensitiveString

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", to_case_insensitive(self.name))

    def __str__(self) -> str:
        return str(self.name)


def users(members: Iterable["RoleUser | str"] | None) -> set[RoleUser]:
    """Normalize members into a de-duplicated set of RoleUser.

    Args:
        members: RoleUser instances or plain user names.

    Returns:
        Set of RoleUser; empty for None.
    """
    if members is None:
        return set()
    return {member if isinstance(member, RoleUser) else RoleUser(member) for member in members}
