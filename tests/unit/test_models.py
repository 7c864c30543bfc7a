"""Unit tests for the Pydantic integration."""

from __future__ import annotations

from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from swissuid import SwissUid, SwissUidField, uid_field
from swissuid.models import UID_PATTERN


class Company(BaseModel):
    """Company record for testing."""

    name: str
    uid: SwissUidField = uid_field()
    vat_uid: Optional[SwissUidField] = uid_field(default=None)


class TestSwissUidField:
    """Test the annotated field type."""

    def test_validate_from_string(self, uid: SwissUid) -> None:
        """Test text input is parsed."""
        company = Company(name="ACME", uid="CHE-109.322.551 HR")

        assert isinstance(company.uid, SwissUid)
        assert company.uid == uid
        assert company.vat_uid is None

    def test_validate_from_instance(self, uid: SwissUid) -> None:
        """Test SwissUid instances pass through."""
        company = Company(name="ACME", uid=uid, vat_uid=uid)

        assert company.uid is uid
        assert company.vat_uid is uid

    def test_invalid_check_digit(self) -> None:
        """Test parse errors surface as validation errors."""
        with pytest.raises(ValidationError, match="check digit"):
            Company(name="ACME", uid="CHE-109.322.552")

    def test_no_valid_check_digit(self) -> None:
        """Test a payload without check digit is rejected as such."""
        with pytest.raises(ValidationError, match="no valid check digit"):
            Company(name="ACME", uid="CHE-100.000.800")

    def test_invalid_prefix(self) -> None:
        """Test prefix errors surface as validation errors."""
        with pytest.raises(ValidationError, match="uid"):
            Company(name="ACME", uid="CH-109.322.551")

    def test_wrong_type(self) -> None:
        """Test non-string input is rejected."""
        with pytest.raises(ValidationError, match="string"):
            Company(name="ACME", uid=109322551)

    def test_missing_uid(self) -> None:
        """Test the field is required."""
        with pytest.raises(ValidationError):
            Company(name="ACME")  # type: ignore[call-arg]

    def test_serialize(self) -> None:
        """Test UIDs serialize to the plain form."""
        company = Company(name="ACME", uid="CHE109322551 MWST")

        assert company.model_dump() == {
            "name": "ACME",
            "uid": "CHE-109.322.551",
            "vat_uid": None,
        }
        assert '"uid":"CHE-109.322.551"' in company.model_dump_json()

    def test_json_roundtrip(self) -> None:
        """Test JSON output validates back to an equal model."""
        company = Company(name="ACME", uid="CHE-109.322.551", vat_uid="CHE-100.002.005")

        assert Company.model_validate_json(company.model_dump_json()) == company

    def test_json_schema(self) -> None:
        """Test the JSON schema describes the canonical string."""
        schema = Company.model_json_schema()
        uid_schema = schema["properties"]["uid"]

        assert uid_schema["type"] == "string"
        assert uid_schema["pattern"] == UID_PATTERN
        assert "uid" in schema["required"]


class TestUidField:
    """Test the field helper."""

    def test_defaults(self) -> None:
        """Test the description and example are filled in."""
        info = uid_field()

        assert info.description == "Swiss business identifier (eCH-0097)"
        assert info.examples == ["CHE-109.322.551"]

    def test_overrides(self) -> None:
        """Test explicit arguments win."""
        info = uid_field(description="VAT number", default=None)

        assert info.description == "VAT number"
        assert info.default is None
