"""validkit: parameterized validators with locale-keyed error messages.

Usage:
    from validkit import business_id, set_locale

    set_locale("en")
    business_id().parse("04595257")       # "04595257"
    business_id().safe_parse("12345672")  # Failure(error=ValidationError(key="invalid", ...))
"""

from validkit.core.errors import ValidationError, ValidationFailed
from validkit.core.result import Failure, Result, Success
from validkit.domain.validators.base import Validator
from validkit.domain.validators.common import (
    FileInfo,
    boolean,
    color,
    coordinate,
    credit_card,
    date,
    datetime,
    email,
    file,
    id,
    integer,
    ip,
    number,
    password,
    text,
    time,
    url,
)
from validkit.domain.validators.taiwan import (
    bank_account,
    business_id,
    fax,
    invoice,
    license_plate,
    mobile,
    national_id,
    passport,
    postal_code,
    tel,
)
from validkit.i18n import get_locale, set_locale, t, use_locale

__version__ = "0.1.0"

__all__ = [
    "Failure",
    "FileInfo",
    "Result",
    "Success",
    "ValidationError",
    "ValidationFailed",
    "Validator",
    "bank_account",
    "boolean",
    "business_id",
    "color",
    "coordinate",
    "credit_card",
    "date",
    "datetime",
    "email",
    "fax",
    "file",
    "get_locale",
    "id",
    "integer",
    "invoice",
    "ip",
    "license_plate",
    "mobile",
    "national_id",
    "number",
    "passport",
    "password",
    "postal_code",
    "set_locale",
    "t",
    "tel",
    "text",
    "time",
    "url",
    "use_locale",
]
