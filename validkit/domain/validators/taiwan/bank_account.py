"""Taiwan bank accounts: ``<3-digit bank code>-<10 to 16 digit account>``.

The bank code part is optional in the input; a validator can be configured
with a fixed ``bank_code`` that is prepended to bare account numbers.
"""

import re
from dataclasses import dataclass
from typing import Any

from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text

TAIWAN_BANK_CODES: dict[str, str] = {
    "004": "台灣銀行",
    "005": "土地銀行",
    "006": "合庫",
    "007": "第一銀行",
    "008": "華南",
    "009": "彰化",
    "011": "上海",
    "012": "台北富邦",
    "013": "國泰世華",
    "017": "兆豐",
    "021": "花旗",
    "048": "王道",
    "050": "台灣企銀",
    "052": "渣打",
    "053": "台中銀行",
    "054": "京城",
    "081": "滙豐",
    "103": "新光",
    "108": "陽信",
    "118": "板信",
    "147": "三信",
    "700": "中華郵政",
    "803": "聯邦",
    "805": "遠東",
    "806": "元大",
    "807": "永豐",
    "808": "玉山",
    "809": "凱基",
    "810": "星展",
    "812": "台新",
    "816": "安泰",
    "822": "中信",
}

_BANK_CODE = re.compile(r"^\d{3}$", re.ASCII)
_ACCOUNT_NUMBER = re.compile(r"^\d{10,16}$", re.ASCII)
_WHITESPACE = re.compile(r"\s")


@dataclass(frozen=True, slots=True, kw_only=True)
class BankAccount:
    """A bank account split into its parts.

    Attributes:
        bank_code: Three-digit bank code, or None when absent.
        account_number: Account number digits.
    """

    bank_code: str | None
    account_number: str

    @property
    def bank_name(self) -> str | None:
        return get_bank_name(self.bank_code) if self.bank_code else None


def get_bank_name(bank_code: str) -> str | None:
    """
    >>> get_bank_name("004")
    '台灣銀行'
    """
    return TAIWAN_BANK_CODES.get(bank_code)


def parse_bank_account(value: str) -> BankAccount | None:
    """Split ``value`` into bank code and account number.

    Returns None when the value has more than one ``-``.
    """
    parts = value.split("-")
    if len(parts) == 1:
        return BankAccount(bank_code=None, account_number=parts[0])
    if len(parts) == 2:
        return BankAccount(bank_code=parts[0], account_number=parts[1])
    return None


def validate_bank_account(value: str, validate_bank_code: bool = True) -> bool:
    """Validate a bank account string.

    Example:
        >>> validate_bank_account("004-1234567890")
        True
        >>> validate_bank_account("999-1234567890")
        False
    """
    account = parse_bank_account(value)
    if account is None:
        return False
    if account.bank_code is not None and not _valid_bank_code(account.bank_code, validate_bank_code):
        return False
    return bool(_ACCOUNT_NUMBER.match(account.account_number))


def _valid_bank_code(code: str, known_only: bool) -> bool:
    if not _BANK_CODE.match(code):
        return False
    return not known_only or code in TAIWAN_BANK_CODES


class BankAccountOptions(ValidatorOptions):
    """Options for ``bank_account``.

    Attributes:
        validate_bank_code: Require the bank code to be in ``TAIWAN_BANK_CODES``.
        bank_code: Bank code prepended to values without ``-``.
    """

    validate_bank_code: bool = True
    bank_code: str | None = None
    default_value: str | None = None


def bank_account(options: BankAccountOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a bank account validator.

    Whitespace is removed. Keys: ``required``, ``invalid`` (malformed),
    ``invalidBankCode``, ``invalidAccountNumber``.
    """
    opts = resolve_options(BankAccountOptions, options, kwargs)

    def preprocess(value: Any) -> str | None:
        text = prepare_text(value, required=opts.required, default=opts.default_value)
        if not text:
            return text
        text = _WHITESPACE.sub("", text)
        if opts.transform is not None:
            text = opts.transform(text)
        if opts.bank_code and "-" not in text:
            text = f"{opts.bank_code}-{text}"
        return text

    def bank_code_ok(value: str) -> bool:
        account = parse_bank_account(value)
        return account is None or account.bank_code is None or _valid_bank_code(
            account.bank_code, opts.validate_bank_code
        )

    def account_number_ok(value: str) -> bool:
        account = parse_bank_account(value)
        return account is not None and bool(_ACCOUNT_NUMBER.match(account.account_number))

    return Validator(
        "bank_account",
        namespace="taiwan.bank_account",
        required=opts.required,
        preprocess=preprocess,
        rules=[
            Rule("invalid", lambda v: parse_bank_account(v) is not None),
            Rule("invalidBankCode", bank_code_ok),
            Rule("invalidAccountNumber", account_number_ok),
        ],
        messages=opts.messages,
    )
