"""Ordered collection of configuration properties.

Base of every entity that carries an open, plugin-defined property bag.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from authz_config.domain.entities.configuration_property import (
    ConfigurationProperty,
    SecureValueCipher,
)

DUPLICATE_KEY_FIELD = "configurationKey"


class Configuration:
    """Ordered list of configuration properties.

    Keys are not required to be unique; ``validate_uniqueness`` reports
    repeats. Two configurations are equal when they hold equal properties
    in the same order.
    """

    def __init__(self, *properties: ConfigurationProperty) -> None:
        self._properties: list[ConfigurationProperty] = []
        for prop in properties:
            self.add(prop)

    def add(self, prop: ConfigurationProperty) -> None:
        if not isinstance(prop, ConfigurationProperty):
            raise TypeError(
                f"Expected ConfigurationProperty, got {type(prop).__name__}"
            )
        self._properties.append(prop)

    def add_all(self, properties: Iterable[ConfigurationProperty]) -> None:
        for prop in properties:
            self.add(prop)

    def add_new_configuration(self, key: str, value: str | None, is_secure: bool = False) -> None:
        """Append a plain property built from its parts."""
        self.add(ConfigurationProperty(key=key, value=value, secure=is_secure))

    def remove(self, key: str) -> None:
        """Remove every property stored under ``key``."""
        self._properties = [prop for prop in self._properties if prop.key != key]

    def get_property(self, key: str) -> ConfigurationProperty | None:
        for prop in self._properties:
            if prop.key == key:
                return prop
        return None

    def list_of_config_keys(self) -> list[str]:
        return [prop.key for prop in self._properties]

    def get_configuration_as_map(
        self,
        add_secure_fields: bool = True,
        cipher: SecureValueCipher | None = None,
    ) -> dict[str, str | None]:
        """Key to plain value mapping, as handed to a plugin.

        Args:
            add_secure_fields: Include secure properties (decrypted).
            cipher: Cipher used to decrypt secure values. Defaults to the
                encryption service keyed from settings.

        Returns:
            Dictionary of key to value. A repeated key keeps its last value.
        """
        result: dict[str, str | None] = {}
        for prop in self._properties:
            if prop.is_secure() and not add_secure_fields:
                continue
            result[prop.key] = prop.get_value(cipher)
        return result

    def validate_uniqueness(self, entity_name: str) -> None:
        """Flag every property whose key appears more than once.

        Args:
            entity_name: Name of the owning entity, used in the message.
        """
        counts: dict[str, int] = {}
        for prop in self._properties:
            counts[prop.key] = counts.get(prop.key, 0) + 1
        for prop in self._properties:
            if counts[prop.key] > 1:
                prop.add_error(
                    DUPLICATE_KEY_FIELD,
                    f"Duplicate key '{prop.key}' found for {entity_name}",
                )

    def has_errors(self) -> bool:
        return any(prop.has_errors() for prop in self._properties)

    @property
    def properties(self) -> list[ConfigurationProperty]:
        return list(self._properties)

    def __iter__(self) -> Iterator[ConfigurationProperty]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __getitem__(self, index: int) -> ConfigurationProperty:
        return self._properties[index]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._properties == other._properties

    def __hash__(self) -> int:
        return hash(tuple(self._properties))
