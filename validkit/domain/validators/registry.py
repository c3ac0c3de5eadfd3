"""Validation Rules Registry.

Single source of truth for every validator factory shipped by validkit, with
self-enforcing compliance tests (tests/unit/test_validation_registry_compliance.py).

Pattern: Registry Pattern with metadata catalog and helper functions.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

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


class ValidationCategory(str, Enum):
    """Categories for validation rules.

    Used to group validators by their domain purpose.
    """

    COMMON = "common"  # Text, numbers, dates, network, files
    TAIWAN = "taiwan"  # Taiwan identifiers, phone numbers, postal codes


@dataclass(frozen=True, kw_only=True)
class ValidationRuleMetadata:
    """Metadata for a single validator factory.

    Attributes:
        rule_name: Unique identifier (the factory name, e.g. 'business_id').
        factory: Callable building a ``Validator`` from keyword options.
        namespace: Message catalog namespace used by the validator.
        description: Human-readable description of what the validator accepts.
        examples: Values accepted by ``factory()`` with default options.
        category: Category for grouping (COMMON, TAIWAN).

    Example:
        >>> metadata = ValidationRuleMetadata(
        ...     rule_name="business_id",
        ...     factory=business_id,
        ...     namespace="taiwan.business_id",
        ...     description="Taiwan Unified Business Number with checksum",
        ...     examples=["04595257"],
        ...     category=ValidationCategory.TAIWAN,
        ... )
    """

    rule_name: str
    factory: Callable[..., Validator[Any]]
    namespace: str
    description: str
    examples: list[Any]
    category: ValidationCategory


def _common(
    rule_name: str, factory: Callable[..., Validator[Any]], namespace: str, description: str, examples: list[Any]
) -> ValidationRuleMetadata:
    return ValidationRuleMetadata(
        rule_name=rule_name,
        factory=factory,
        namespace=f"common.{namespace}",
        description=description,
        examples=examples,
        category=ValidationCategory.COMMON,
    )


def _taiwan(
    rule_name: str, factory: Callable[..., Validator[Any]], description: str, examples: list[Any]
) -> ValidationRuleMetadata:
    return ValidationRuleMetadata(
        rule_name=rule_name,
        factory=factory,
        namespace=f"taiwan.{rule_name}",
        description=description,
        examples=examples,
        category=ValidationCategory.TAIWAN,
    )


# =============================================================================
# Validation Rules Registry
# =============================================================================

VALIDATION_RULES_REGISTRY: dict[str, ValidationRuleMetadata] = {
    rule.rule_name: rule
    for rule in (
        _common("text", text, "text", "Free text with length, affix and pattern checks", ["hello world"]),
        _common(
            "email",
            email,
            "email",
            "Email address with domain allow/block lists and business-only mode",
            ["john.doe@company.com", "sales@mail.acme.com.tw"],
        ),
        _common(
            "password",
            password,
            "password",
            "Password with character class, pattern and strength requirements",
            ["Str0ng!Passw0rd", "secret"],
        ),
        _common("number", number, "number", "Integer or decimal number, optionally parsed from text", ["42", 3.14]),
        _common("integer", integer, "integer", "Whole number with optional bounds", ["100", 7]),
        _common("boolean", boolean, "boolean", "Boolean from configurable truthy/falsy values", ["true", False]),
        _common(
            "url",
            url,
            "url",
            "Absolute URL with protocol, domain, port, path and query policies",
            ["https://www.example.com/path?q=1", "ftp://files.example.com"],
        ),
        _common("date", date, "date", "Calendar date in a token format (YYYY-MM-DD)", ["2024-03-15"]),
        _common("time", time, "time", "Time of day in 24- or 12-hour format", ["09:30", "23:59"]),
        _common(
            "datetime",
            datetime,
            "datetime",
            "Date and time in a configurable format and timezone",
            ["2024-03-15 14:30"],
        ),
        _common("color", color, "color", "Hex, RGB(A) or HSL(A) color", ["#ff0000", "rgb(255, 0, 128)"]),
        _common(
            "coordinate",
            coordinate,
            "coordinate",
            "Latitude/longitude pair or single component",
            ["25.0330, 121.5654"],
        ),
        _common(
            "credit_card",
            credit_card,
            "creditCard",
            "Payment card number with Luhn checksum and brand detection",
            ["4111111111111111", "5555 5555 5555 4444"],
        ),
        _common("ip", ip, "ip", "IPv4 or IPv6 address, optionally with CIDR prefix", ["192.168.1.1", "2001:db8::1"]),
        _common(
            "id",
            id,
            "id",
            "Identifier: UUID, ObjectId, Snowflake, CUID, ULID, Nano ID, numeric or ShortId",
            ["507f1f77bcf86cd799439011", "550e8400-e29b-41d4-a716-446655440000"],
        ),
        _common(
            "file",
            file,
            "file",
            "Uploaded file metadata: size, MIME type, extension and name",
            [FileInfo(name="photo.jpg", size=2048, type="image/jpeg")],
        ),
        _taiwan(
            "national_id",
            national_id,
            "Taiwan National ID (citizen and resident certificate) with checksum",
            ["A123456789"],
        ),
        _taiwan("business_id", business_id, "Taiwan Unified Business Number (統一編號) with checksum", ["04595257"]),
        _taiwan("tel", tel, "Taiwan landline telephone number", ["02-2345-6789", "0800-123-456"]),
        _taiwan("fax", fax, "Taiwan fax number (2024 numbering plan)", ["02-2345-6789"]),
        _taiwan("mobile", mobile, "Taiwan mobile phone number (09xx)", ["0912345678", "0912-345-678"]),
        _taiwan("postal_code", postal_code, "Taiwan postal code (3 or 6 digits)", ["100", "100-001"]),
        _taiwan("bank_account", bank_account, "Taiwan bank code and account number", ["004-1234567890"]),
        _taiwan("invoice", invoice, "Taiwan uniform invoice number (統一發票)", ["AB12345678"]),
        _taiwan("license_plate", license_plate, "Taiwan vehicle license plate", ["ABC-1234"]),
        _taiwan("passport", passport, "Taiwan (ROC) passport number", ["212345678"]),
    )
}


# =============================================================================
# Helper Functions
# =============================================================================


def get_validation_rule(rule_name: str) -> ValidationRuleMetadata | None:
    """Get validation rule metadata by name.

    Args:
        rule_name: Name of the validation rule (e.g., 'email', 'business_id').

    Returns:
        ValidationRuleMetadata if found, None otherwise.

    Example:
        >>> rule = get_validation_rule("business_id")
        >>> if rule:
        ...     validated = rule.factory().parse("04595257")
    """
    return VALIDATION_RULES_REGISTRY.get(rule_name)


def get_all_validation_rules() -> list[ValidationRuleMetadata]:
    """Get all validation rules in the registry."""
    return list(VALIDATION_RULES_REGISTRY.values())


def get_rules_by_category(category: ValidationCategory) -> list[ValidationRuleMetadata]:
    """Get all validation rules in a specific category.

    Args:
        category: Category to filter by (COMMON, TAIWAN).

    Returns:
        List of ValidationRuleMetadata objects in the category.
    """
    return [
        rule for rule in VALIDATION_RULES_REGISTRY.values() if rule.category == category
    ]


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics.

    Returns:
        Dictionary with:
        - total_rules: Total number of rules
        - by_category: Count of rules per category

    Example:
        >>> stats = get_statistics()
        >>> stats["by_category"]["taiwan"]
        10
    """
    rules = list(VALIDATION_RULES_REGISTRY.values())
    category_counts: dict[str, int] = {}

    for rule in rules:
        category_key = rule.category.value
        category_counts[category_key] = category_counts.get(category_key, 0) + 1

    return {
        "total_rules": len(rules),
        "by_category": category_counts,
    }
