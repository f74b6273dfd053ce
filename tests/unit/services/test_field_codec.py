"""
Unit tests for the schema-driven field codec.

Covers decode (document -> Realm) and encode (Realm -> document), with the
focus on presence tracking: explicit zero/false values, defaulted fields
and optional fields the user never configured.
"""

import pytest

from keycloak_realm_provider.errors import ValidationError
from keycloak_realm_provider.models.document import ResourceDocument
from keycloak_realm_provider.models.realm import Realm
from keycloak_realm_provider.schema.realm import REALM_SCHEMA
from keycloak_realm_provider.services.field_codec import FieldCodec
from tests.fixtures.realm_resources import COMPLETE_REALM, MINIMAL_REALM


@pytest.fixture
def codec() -> FieldCodec[Realm]:
    return FieldCodec(REALM_SCHEMA, Realm)


class TestDecode:
    """Document to record."""

    def test_minimal_document(self, codec):
        realm = codec.decode(ResourceDocument(MINIMAL_REALM))

        assert realm.id is None
        assert realm.realm == "acme"
        assert realm.enabled is True
        assert realm.ssl_required == "EXTERNAL"
        assert realm.access_token_lifespan is None
        assert realm.supported_locales is None
        assert realm.smtp_server is None

    def test_default_applied_when_unset(self, codec):
        """ssl_required falls back to EXTERNAL when not configured."""
        realm = codec.decode(ResourceDocument({"realm": "acme", "enabled": False}))
        assert realm.ssl_required == "EXTERNAL"

    def test_zero_value_is_present(self, codec):
        doc = ResourceDocument({**MINIMAL_REALM, "access_token_lifespan": 0})
        realm = codec.decode(doc)
        assert realm.access_token_lifespan == 0

    def test_false_is_present(self, codec):
        doc = ResourceDocument({**MINIMAL_REALM, "remember_me": False})
        realm = codec.decode(doc)
        assert realm.remember_me is False
        assert realm.to_api_payload()["rememberMe"] is False

    def test_empty_list_stays_empty(self, codec):
        doc = ResourceDocument({**MINIMAL_REALM, "default_roles": []})
        assert codec.decode(doc).default_roles == []

    def test_identity_copied_for_existing_resource(self, codec):
        doc = ResourceDocument(MINIMAL_REALM, resource_id="acme")
        assert codec.decode(doc).id == "acme"

    def test_identity_skipped_for_new_resource(self, codec):
        assert codec.decode(ResourceDocument(MINIMAL_REALM)).id is None

    def test_record_construction_error_becomes_validation_error(self, codec):
        """Values the record rejects surface as provider ValidationError."""
        doc = ResourceDocument({**MINIMAL_REALM, "ssl_required": "BOGUS"})

        with pytest.raises(ValidationError) as exc_info:
            codec.decode(doc)

        assert "Invalid realm configuration" in str(exc_info.value)

    def test_decode_does_not_alias_document_lists(self, codec):
        doc = ResourceDocument({**MINIMAL_REALM, "supported_locales": ["en"]})
        realm = codec.decode(doc)
        realm.supported_locales.append("de")
        assert doc.get("supported_locales") == ["en"]


class TestEncode:
    """Record to document."""

    def test_round_trip_reproduces_configured_fields(self, codec):
        doc = ResourceDocument(COMPLETE_REALM)
        assert codec.encode(codec.decode(doc)) == doc

    def test_round_trip_keeps_unset_fields_unset(self, codec):
        doc = ResourceDocument(
            {**MINIMAL_REALM, "ssl_required": "NONE", "verify_email": True}
        )
        encoded = codec.encode(codec.decode(doc))

        assert set(encoded) == {"realm", "enabled", "ssl_required", "verify_email"}
        assert not encoded.is_set("access_token_lifespan")

    def test_round_trip_zero_value_fidelity(self, codec):
        doc = ResourceDocument({**MINIMAL_REALM, "failure_factor": 0})
        encoded = codec.encode(codec.decode(doc))
        assert encoded.get_ok("failure_factor") == (0, True)

    def test_defaulted_field_always_written(self, codec):
        encoded = codec.encode(Realm(realm="acme", enabled=True))
        assert encoded.get("ssl_required") == "EXTERNAL"

    def test_identity_taken_from_record(self, codec):
        encoded = codec.encode(Realm(id="acme", realm="acme", enabled=True))
        assert encoded.id == "acme"

    def test_absent_value_leaves_existing_representation(self, codec):
        """A field the record does not carry keeps its document value."""
        existing = ResourceDocument(
            {**MINIMAL_REALM, "display_name": "Acme"}, resource_id="acme"
        )
        encoded = codec.encode(Realm(id="acme", realm="acme", enabled=True), existing)
        assert encoded.get("display_name") == "Acme"

    def test_record_value_replaces_existing_value(self, codec):
        existing = ResourceDocument({**MINIMAL_REALM, "access_token_lifespan": 60})
        record = Realm(
            id="acme", realm="acme", enabled=True, access_token_lifespan=300
        )
        assert codec.encode(record, existing).get("access_token_lifespan") == 300

    def test_existing_document_not_modified(self, codec):
        existing = ResourceDocument(MINIMAL_REALM)
        codec.encode(Realm(id="acme", realm="acme", enabled=False), existing)
        assert existing.get("enabled") is True
        assert existing.id is None
