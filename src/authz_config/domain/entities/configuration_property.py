"""Configuration property entity.

A configuration property is one key/value setting passed opaquely to a
plugin. Secure properties hold their value encrypted.
"""

from dataclasses import dataclass, field
from typing import Protocol

from authz_config.core.config import get_settings
from authz_config.domain.entities.config_errors import ConfigErrors
from authz_config.infrastructure.security.encryption import get_encryption_service


class SecureValueCipher(Protocol):
    """Cipher used to encrypt and decrypt secure property values."""

    def encrypt(self, plaintext: str) -> str: ...

    def decrypt(self, ciphertext: str) -> str: ...


@dataclass
class ConfigurationProperty:
    """Key/value setting forwarded to a plugin.

    Attributes:
        key: Property name, as defined by the plugin.
        value: Plain value (None when unset or held encrypted).
        encrypted_value: Ciphertext of a secure value.
        secure: Whether the plugin declares this property secret. A secure
            property may still carry a plain value until it is encrypted.
        errors: Validation errors for this property (excluded from equality).
    """

    key: str
    value: str | None = None
    encrypted_value: str | None = None
    secure: bool = False
    errors: ConfigErrors = field(default_factory=ConfigErrors, compare=False, repr=False)

    def is_secure(self) -> bool:
        return self.secure or self.encrypted_value is not None

    def get_value(self, cipher: SecureValueCipher | None = None) -> str | None:
        """Return the plain value, decrypting it when held encrypted.

        Args:
            cipher: Cipher for encrypted values. Defaults to the encryption
                service keyed from settings.

        Returns:
            The plain value, or None if unset.
        """
        if self.encrypted_value is not None:
            if cipher is None:
                cipher = get_encryption_service()
            return cipher.decrypt(self.encrypted_value)
        return self.value

    def display_value(self) -> str | None:
        """Value safe to show in logs and UIs."""
        if self.is_secure():
            return get_settings().secure_value_mask
        return self.value

    def handle_secure_value_configuration(
        self, is_secure: bool, cipher: SecureValueCipher
    ) -> None:
        """Move a plain value into the encrypted slot when declared secure.

        Args:
            is_secure: Whether the plugin declares this key secure.
            cipher: Cipher used to encrypt the plain value.
        """
        if not is_secure:
            return
        self.secure = True
        if self.value is not None and self.encrypted_value is None:
            self.encrypted_value = cipher.encrypt(self.value)
            self.value = None

    def add_error(self, field_name: str, message: str) -> None:
        self.errors.add(field_name, message)

    def has_errors(self) -> bool:
        return not self.errors.is_empty()

    def __hash__(self) -> int:
        return hash((self.key, self.value, self.encrypted_value, self.secure))
