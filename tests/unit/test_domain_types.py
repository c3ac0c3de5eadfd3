"""Unit tests for annotated domain types.

Tests cover:
- Taiwan types normalize and reject values inside pydantic models
- EmailAddress / StrongPassword
- JSON schema carries Field metadata
"""

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from validkit.domain.types import (
    EmailAddress,
    StrongPassword,
    TaiwanBusinessId,
    TaiwanMobile,
    TaiwanNationalId,
    TaiwanPostalCode,
    TaiwanTel,
)


class CompanyContact(BaseModel):
    tax_id: TaiwanBusinessId
    owner_id: TaiwanNationalId
    mobile: TaiwanMobile
    office: TaiwanTel
    zip_code: TaiwanPostalCode


class Account(BaseModel):
    email: EmailAddress
    password: StrongPassword


def _contact(**overrides):
    data = {
        "tax_id": "04595257",
        "owner_id": "a123456789",
        "mobile": "0912345678",
        "office": "02-2345-6789",
        "zip_code": "100-001",
    }
    data.update(overrides)
    return CompanyContact(**data)


@pytest.mark.unit
class TestTaiwanTypes:
    """Test Taiwan annotated types."""

    def test_valid_contact_is_normalized(self):
        """Test canonical forms are stored on the model."""
        contact = _contact()

        assert contact.tax_id == "04595257"
        assert contact.owner_id == "A123456789"
        assert contact.zip_code == "100001"

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("tax_id", "12345672"),
            ("owner_id", "A123456788"),
            ("mobile", "0812345678"),
            ("office", "12345"),
            ("zip_code", "12"),
        ],
    )
    def test_invalid_values_raise(self, field, value):
        """Test validator failures surface as pydantic errors."""
        with pytest.raises(PydanticValidationError) as exc_info:
            _contact(**{field: value})

        assert exc_info.value.errors()[0]["loc"] == (field,)

    def test_error_message_comes_from_catalog(self):
        """Test the catalog message is kept in the pydantic error."""
        with pytest.raises(PydanticValidationError) as exc_info:
            _contact(tax_id="1234567")

        assert "Must be exactly 8 digits" in str(exc_info.value)

    def test_json_schema_has_description(self):
        """Test Field metadata reaches the schema."""
        schema = CompanyContact.model_json_schema()

        assert schema["properties"]["tax_id"]["description"] == "Taiwan Unified Business Number (統一編號)"
        assert schema["properties"]["mobile"]["examples"] == ["0912345678"]


@pytest.mark.unit
class TestCommonTypes:
    """Test EmailAddress and StrongPassword."""

    def test_valid_account(self):
        """Test email is lowercased and password kept."""
        account = Account(email="Jane.Doe@Company.com", password="SecurePass123!")

        assert account.email == "jane.doe@company.com"
        assert account.password == "SecurePass123!"

    def test_invalid_email(self):
        """Test malformed email."""
        with pytest.raises(PydanticValidationError):
            Account(email="not-an-email", password="SecurePass123!")

    @pytest.mark.parametrize("value", ["Sh0rt!", "weakpass1!", "NOLOWER123!", "NoDigits!!", "NoSpecial123"])
    def test_weak_password(self, value):
        """Test each strength requirement."""
        with pytest.raises(PydanticValidationError):
            Account(email="jane@company.com", password=value)
