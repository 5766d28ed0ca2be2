import base64
import hashlib
from functools import lru_cache

from cryptography.fernet import Fernet, InvalidToken

from authz_config.core.config import get_settings


class CipherError(Exception):
    """Base class for secure value errors."""
    pass


class DecryptionError(CipherError):
    """Raised when an encrypted value cannot be decrypted with the current key."""
    pass


class EncryptionService:
    """
    Encryption service for secure configuration property values, using
    Fernet symmetric encryption.
    """

    def __init__(self, secret_key: str):
        """
        Initialize the encryption service with a secret key.
        The secret key is hashed using SHA-256 to ensure it's a valid 32-byte Fernet key.
        """
        key_bytes = secret_key.encode("utf-8")
        h = hashlib.sha256(key_bytes).digest()
        fernet_key = base64.urlsafe_b64encode(h)
        self._fernet = Fernet(fernet_key)

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt a plaintext string and return a base64-encoded ciphertext.
        """
        if not plaintext:
            return plaintext
        ciphertext = self._fernet.encrypt(plaintext.encode("utf-8"))
        return ciphertext.decode("utf-8")

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt a base64-encoded ciphertext and return the original plaintext.

        Raises:
            DecryptionError: If the value is not a Fernet token for this key.
        """
        if not ciphertext:
            return ciphertext
        try:
            plaintext = self._fernet.decrypt(ciphertext.encode("utf-8"))
        except (InvalidToken, ValueError) as e:
            raise DecryptionError("Could not decrypt value with the configured key") from e
        return plaintext.decode("utf-8")

    def can_decrypt(self, ciphertext: str) -> bool:
        """Check whether a ciphertext was produced with the configured key."""
        try:
            self.decrypt(ciphertext)
        except DecryptionError:
            return False
        return True


@lru_cache
def get_encryption_service() -> EncryptionService:
    """Get an encryption service keyed from the cached settings."""
    return EncryptionService(secret_key=get_settings().encryption_key)
