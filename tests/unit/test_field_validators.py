"""Unit tests for realm field validators."""

import pytest

from keycloak_realm_provider.utils.validation import (
    MAX_REALM_NAME_LENGTH,
    one_of,
    validate_non_negative,
    validate_realm_name,
    validate_string_map,
    validate_unique_items,
)


class TestOneOf:
    def test_accepts_allowed_value(self):
        one_of(["ALL", "EXTERNAL", "NONE"])("NONE")

    def test_rejects_other_value(self):
        with pytest.raises(ValueError, match="Valid are ALL, EXTERNAL, NONE"):
            one_of(["ALL", "EXTERNAL", "NONE"])("external")


class TestValidateRealmName:
    """Realm names are used as path segments."""

    @pytest.mark.parametrize("name", ["acme", "acme-eu", "ACME_2", "a.b"])
    def test_valid_names(self, name):
        validate_realm_name(name)

    @pytest.mark.parametrize("name", ["", "acme/eu", "acme eu", "a?b", "a#b"])
    def test_invalid_names(self, name):
        with pytest.raises(ValueError):
            validate_realm_name(name)

    def test_too_long_name(self):
        with pytest.raises(ValueError, match="characters or less"):
            validate_realm_name("a" * (MAX_REALM_NAME_LENGTH + 1))


class TestCollectionValidators:
    def test_non_negative(self):
        validate_non_negative(0)
        with pytest.raises(ValueError):
            validate_non_negative(-1)

    def test_unique_items(self):
        validate_unique_items(["en", "nl"])
        with pytest.raises(ValueError, match="Duplicate entry 'en'"):
            validate_unique_items(["en", "nl", "en"])

    def test_string_map(self):
        validate_string_map({"host": "smtp.acme.test", "port": "587"})
        with pytest.raises(ValueError):
            validate_string_map({"": "x"})
        with pytest.raises(ValueError):
            validate_string_map({"ssl": True})
