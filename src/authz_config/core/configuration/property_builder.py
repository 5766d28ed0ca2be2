"""Builder for configuration properties with secure value handling."""

from authz_config.core.logging import get_logger
from authz_config.domain.entities.configuration_property import (
    ConfigurationProperty,
    SecureValueCipher,
)
from authz_config.infrastructure.security.encryption import (
    DecryptionError,
    get_encryption_service,
)

logger = get_logger(__name__)

VALUE_FIELD = "configurationValue"
ENCRYPTED_VALUE_FIELD = "encryptedValue"

BOTH_VALUES_MESSAGE = "You may only specify `value` or `encrypted_value`, not both!"
UNSECURED_ENCRYPTED_MESSAGE = "encrypted_value cannot be specified to a unsecured property."


def _is_not_blank(value: str | None) -> bool:
    return value is not None and value.strip() != ""


class ConfigurationPropertyBuilder:
    """Builds configuration properties from user-supplied parts.

    Conflicting input is kept on the property and reported through its
    errors rather than raised.
    """

    def __init__(self, cipher: SecureValueCipher | None = None) -> None:
        """Initialize the builder.

        Args:
            cipher: Cipher for secure values. Defaults to the encryption
                service keyed from settings, resolved on first use.
        """
        self._cipher = cipher

    @property
    def cipher(self) -> SecureValueCipher:
        if self._cipher is None:
            self._cipher = get_encryption_service()
        return self._cipher

    def create(
        self,
        key: str,
        value: str | None,
        encrypted_value: str | None,
        is_secure: bool,
    ) -> ConfigurationProperty:
        """Create a property.

        Args:
            key: Property key.
            value: Plain value, if supplied.
            encrypted_value: Ciphertext, if supplied.
            is_secure: Whether the plugin declares the key secure.

        Returns:
            The new property, with errors attached for conflicting input.
        """
        prop = ConfigurationProperty(key=key)

        if _is_not_blank(value) and _is_not_blank(encrypted_value):
            prop.add_error(VALUE_FIELD, BOTH_VALUES_MESSAGE)
            prop.add_error(ENCRYPTED_VALUE_FIELD, BOTH_VALUES_MESSAGE)
            prop.value = value
            prop.encrypted_value = encrypted_value
            logger.warning("Property given both plain and encrypted values", key=key)
            return prop

        if is_secure:
            prop.secure = True
            if _is_not_blank(encrypted_value):
                prop.encrypted_value = encrypted_value
                self._check_decryptable(prop)
            if _is_not_blank(value):
                prop.encrypted_value = self.cipher.encrypt(value)
        else:
            if _is_not_blank(encrypted_value):
                prop.add_error(ENCRYPTED_VALUE_FIELD, UNSECURED_ENCRYPTED_MESSAGE)
                prop.encrypted_value = encrypted_value
            if value is not None:
                prop.value = value

        return prop

    def _check_decryptable(self, prop: ConfigurationProperty) -> None:
        try:
            self.cipher.decrypt(prop.encrypted_value)
        except DecryptionError:
            prop.add_error(
                ENCRYPTED_VALUE_FIELD,
                f"Encrypted value for property with key '{prop.key}' is invalid. "
                "This usually happens when the cipher text is modified to have an invalid value.",
            )
