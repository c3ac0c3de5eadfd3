"""Taiwan uniform invoice numbers (統一發票): two letters and eight digits."""

import re
from functools import partial
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import Casing, chain, prepare_text

INVOICE_PATTERN = re.compile(r"^[A-Z]{2}\d{8}$", re.ASCII)


def validate_invoice(value: str) -> bool:
    """
    >>> validate_invoice("AB-12345678")
    True
    """
    return bool(INVOICE_PATTERN.match(value.replace("-", "")))


class InvoiceOptions(ValidatorOptions):
    """Options for ``invoice``."""

    default_value: str | None = None


def invoice(options: InvoiceOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a uniform invoice validator.

    Input is uppercased and dashes are removed (``ab-12345678`` ->
    ``AB12345678``). Keys: ``required``, ``invalid``.
    """
    opts = resolve_options(InvoiceOptions, options, kwargs)

    return Validator(
        "invoice",
        namespace="taiwan.invoice",
        required=opts.required,
        preprocess=partial(
            prepare_text,
            required=opts.required,
            default=opts.default_value,
            casing=Casing.UPPER,
            transform=chain(lambda s: s.replace("-", ""), opts.transform),
        ),
        rules=[Rule("invalid", validate_invoice)],
        messages=opts.messages,
    )
