"""Encryption of secure configuration property values."""

from authz_config.infrastructure.security.encryption import (
    CipherError,
    DecryptionError,
    EncryptionService,
    get_encryption_service,
)

__all__ = [
    "CipherError",
    "DecryptionError",
    "EncryptionService",
    "get_encryption_service",
]
