"""Taiwan-specific validators."""

from validkit.domain.validators.taiwan.bank_account import (
    TAIWAN_BANK_CODES,
    BankAccount,
    BankAccountOptions,
    bank_account,
    get_bank_name,
    parse_bank_account,
    validate_bank_account,
)
from validkit.domain.validators.taiwan.business_id import (
    BusinessIdOptions,
    business_id,
    validate_business_id,
)
from validkit.domain.validators.taiwan.fax import FaxOptions, fax, validate_fax
from validkit.domain.validators.taiwan.invoice import InvoiceOptions, invoice, validate_invoice
from validkit.domain.validators.taiwan.license_plate import (
    LicensePlateOptions,
    PlateType,
    license_plate,
    validate_license_plate,
)
from validkit.domain.validators.taiwan.mobile import MobileOptions, mobile, validate_mobile
from validkit.domain.validators.taiwan.national_id import (
    CITY_CODES,
    NationalIdOptions,
    NationalIdType,
    national_id,
    validate_citizen_id,
    validate_national_id,
    validate_new_resident_id,
    validate_old_resident_id,
)
from validkit.domain.validators.taiwan.numbering_plan import (
    FAX_PLAN,
    TELEPHONE_PLAN,
    AreaCode,
    matches_plan,
)
from validkit.domain.validators.taiwan.passport import (
    PassportOptions,
    PassportType,
    get_passport_type,
    passport,
    validate_passport,
)
from validkit.domain.validators.taiwan.postal_code import (
    VALID_3_DIGIT_PREFIXES,
    PostalCodeFormat,
    PostalCodeInfo,
    PostalCodeOptions,
    get_postal_code_info,
    is_valid_postal_prefix,
    postal_code,
    validate_postal_code,
)
from validkit.domain.validators.taiwan.tel import TelOptions, tel, validate_tel

__all__ = [
    "AreaCode",
    "BankAccount",
    "BankAccountOptions",
    "BusinessIdOptions",
    "CITY_CODES",
    "FAX_PLAN",
    "FaxOptions",
    "InvoiceOptions",
    "LicensePlateOptions",
    "MobileOptions",
    "NationalIdOptions",
    "NationalIdType",
    "PassportOptions",
    "PassportType",
    "PlateType",
    "PostalCodeFormat",
    "PostalCodeInfo",
    "PostalCodeOptions",
    "TAIWAN_BANK_CODES",
    "TELEPHONE_PLAN",
    "TelOptions",
    "VALID_3_DIGIT_PREFIXES",
    "bank_account",
    "business_id",
    "fax",
    "get_bank_name",
    "get_passport_type",
    "get_postal_code_info",
    "invoice",
    "is_valid_postal_prefix",
    "license_plate",
    "matches_plan",
    "mobile",
    "national_id",
    "parse_bank_account",
    "passport",
    "postal_code",
    "tel",
    "validate_bank_account",
    "validate_business_id",
    "validate_citizen_id",
    "validate_fax",
    "validate_invoice",
    "validate_license_plate",
    "validate_mobile",
    "validate_national_id",
    "validate_new_resident_id",
    "validate_old_resident_id",
    "validate_passport",
    "validate_postal_code",
    "validate_tel",
]
