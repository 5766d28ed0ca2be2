"""Field-keyed validation error collection.

Errors are data, not exceptions: validation appends messages here and
callers inspect the collection afterwards.
"""

from collections.abc import Iterator


class ConfigErrors:
    """Mapping of field name to the validation messages raised against it.

    Messages accumulate. ``add`` never replaces or de-duplicates, so running
    the same validation twice records every message twice.
    """

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def add(self, field: str, message: str) -> None:
        """Append one message under ``field``."""
        self._errors.setdefault(field, []).append(message)

    def add_all(self, other: "ConfigErrors") -> None:
        """Append every message of ``other``, field by field."""
        for field, messages in other.items():
            for message in messages:
                self.add(field, message)

    def get_all(self) -> list[str]:
        """All messages, in the order their fields were first reported."""
        return [message for messages in self._errors.values() for message in messages]

    def get_all_on(self, field: str) -> list[str] | None:
        messages = self._errors.get(field)
        return list(messages) if messages is not None else None

    def first_error_on(self, field: str) -> str | None:
        messages = self._errors.get(field)
        return messages[0] if messages else None

    def first_error(self) -> str | None:
        all_errors = self.get_all()
        return all_errors[0] if all_errors else None

    def fields(self) -> list[str]:
        return list(self._errors)

    def items(self) -> Iterator[tuple[str, list[str]]]:
        for field, messages in self._errors.items():
            yield field, list(messages)

    def is_empty(self) -> bool:
        return not self._errors

    def as_string(self) -> str:
        return ", ".join(self.get_all())

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._errors.values())

    def __contains__(self, field: object) -> bool:
        return field in self._errors

    def __repr__(self) -> str:
        return f"ConfigErrors({self._errors!r})"
