"""Validators package exports.

Exports:
    - Composition wrapper and option base classes
    - Registry components (from registry.py)

Factories live in the ``common`` and ``taiwan`` subpackages.
"""

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import (
    ValidatorOptions,
    WhitelistOptions,
    resolve_options,
)
from validkit.domain.validators.preprocess import Casing, TrimMode
from validkit.domain.validators.registry import (
    VALIDATION_RULES_REGISTRY,
    ValidationCategory,
    ValidationRuleMetadata,
    get_all_validation_rules,
    get_rules_by_category,
    get_statistics,
    get_validation_rule,
)

__all__ = [
    # Composition
    "Casing",
    "Rule",
    "TrimMode",
    "Validator",
    "ValidatorOptions",
    "WhitelistOptions",
    "resolve_options",
    # Registry
    "VALIDATION_RULES_REGISTRY",
    "ValidationCategory",
    "ValidationRuleMetadata",
    "get_all_validation_rules",
    "get_rules_by_category",
    "get_statistics",
    "get_validation_rule",
]
