"""Annotated types with centralized validation.

Define validation once, use everywhere. Each type wraps a validator through
``Validator.annotated`` and adds Field metadata for JSON schema.

Usage:
    from validkit.domain.types import TaiwanBusinessId, TaiwanMobile

    class CompanyContact(BaseModel):
        tax_id: TaiwanBusinessId
        phone: TaiwanMobile
"""

from typing import Annotated

from pydantic import Field

from validkit.domain.validators.common import email, password
from validkit.domain.validators.taiwan import (
    business_id,
    mobile,
    national_id,
    postal_code,
    tel,
)

# ============================================================================
# Taiwan Types
# ============================================================================

TaiwanNationalId = Annotated[
    national_id().annotated(str),
    Field(description="Taiwan National ID or resident certificate number", examples=["A123456789"]),
]
"""Taiwan National ID, uppercased.

Examples:
    >>> class Person(BaseModel):
    ...     national_id: TaiwanNationalId
    >>> Person(national_id="a123456789").national_id
    'A123456789'
"""

TaiwanBusinessId = Annotated[
    business_id().annotated(str),
    Field(description="Taiwan Unified Business Number (統一編號)", examples=["04595257"]),
]

TaiwanMobile = Annotated[
    mobile().annotated(str),
    Field(description="Taiwan mobile phone number", examples=["0912345678"]),
]

TaiwanTel = Annotated[
    tel().annotated(str),
    Field(description="Taiwan landline telephone number", examples=["02-2345-6789"]),
]

TaiwanPostalCode = Annotated[
    postal_code().annotated(str),
    Field(description="Taiwan postal code (3 or 6 digits)", examples=["100", "100001"]),
]

# ============================================================================
# Common Types
# ============================================================================

EmailAddress = Annotated[
    email().annotated(str),
    Field(description="Email address", examples=["user@company.com"]),
]

StrongPassword = Annotated[
    password(
        min=8,
        max=128,
        uppercase=True,
        lowercase=True,
        digits=True,
        special=True,
    ).annotated(str),
    Field(description="Password with strength requirements", examples=["SecurePass123!"]),
]
"""Password with strength validation.

Requirements:
- 8 to 128 characters
- At least one uppercase letter, one lowercase letter, one digit
- At least one special character
"""
