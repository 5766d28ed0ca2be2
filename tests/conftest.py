"""Pytest configuration for all tests."""

from collections.abc import Generator

import pytest

from authz_config.core.config import get_settings
from authz_config.infrastructure.security.encryption import (
    EncryptionService,
    get_encryption_service,
)


@pytest.fixture(autouse=True)
def _reset_cached_settings() -> Generator[None, None, None]:
    """Drop cached settings and cipher so environment patches take effect."""
    get_settings.cache_clear()
    get_encryption_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_encryption_service.cache_clear()


@pytest.fixture
def cipher() -> EncryptionService:
    return EncryptionService(secret_key="test-secret-key")
