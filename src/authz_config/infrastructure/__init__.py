"""Infrastructure layer - External dependencies and implementations.

This layer holds the cipher used for secure configuration property values.
"""

from authz_config.infrastructure.security import (
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
