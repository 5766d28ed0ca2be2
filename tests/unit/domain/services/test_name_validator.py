"""Unit tests for NameTypeValidator."""

import os
from unittest.mock import patch

import pytest

from authz_config.domain.entities.case_insensitive_string import CaseInsensitiveString
from authz_config.domain.services.name_validator import (
    DEFAULT_MAX_LENGTH,
    NameTypeValidator,
    get_name_validator,
)


class TestNameTypeValidator:

    @pytest.mark.parametrize(
        "name",
        ["ldap", "ldap-auth-1", "a.b.c", "_x", "-x", "0", "Mixed_Case-1.2", "a" * DEFAULT_MAX_LENGTH],
    )
    def test_valid_names(self, name):
        validator = NameTypeValidator()

        assert validator.is_name_valid(name)
        assert not validator.is_name_invalid(name)

    @pytest.mark.parametrize(
        "name",
        [None, "", ".hidden", "has space", "bad id!", "slash/name", "tab\tname", "a" * (DEFAULT_MAX_LENGTH + 1)],
    )
    def test_invalid_names(self, name):
        validator = NameTypeValidator()

        assert not validator.is_name_valid(name)
        assert validator.is_name_invalid(name)

    def test_accepts_case_insensitive_names(self):
        assert NameTypeValidator().is_name_valid(CaseInsensitiveString("Admins"))

    def test_rejects_case_insensitive_none(self):
        validator = NameTypeValidator()

        assert not validator.is_name_valid(CaseInsensitiveString(None))
        assert validator.is_name_invalid(CaseInsensitiveString(None))

    def test_trailing_newline_is_invalid(self):
        assert not NameTypeValidator().is_name_valid("ldap\n")

    def test_custom_max_length(self):
        validator = NameTypeValidator(max_length=3)

        assert validator.is_name_valid("abc")
        assert not validator.is_name_valid("abcd")
        assert "The maximum allowed length is 3 characters." in validator.error_message("x", "abcd")

    def test_error_message(self):
        message = NameTypeValidator().error_message("plugin role authConfigId", "bad id!")

        assert message == (
            "Invalid plugin role authConfigId name 'bad id!'. This must be alphanumeric and can "
            "contain underscores, hyphens and periods (however, it cannot start with a period). "
            "The maximum allowed length is 255 characters."
        )


def test_get_name_validator_uses_settings():
    with patch.dict(os.environ, {"AUTHZ_CONFIG_NAME_MAX_LENGTH": "10"}):
        validator = get_name_validator()

    assert validator.max_length == 10
