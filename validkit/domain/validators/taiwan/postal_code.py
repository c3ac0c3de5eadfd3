"""Taiwan postal codes (郵遞區號).

Three formats are in use:

- 3 digits: district prefix (``100``)
- 5 digits: prefix + 2-digit suffix, the legacy "3+2" format (``10001``)
- 6 digits: prefix + 3-digit suffix, the "3+3" format introduced in 2020
  (``100001``)

Prefixes are checked against ``VALID_3_DIGIT_PREFIXES`` (strict mode) or the
100-999 range. Suffixes can optionally be checked against per-prefix ranges.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from validkit.core.container import get_logger
from validkit.domain.validators.base import Rule, Validator
from validkit.domain.validators.options import ValidatorOptions, resolve_options
from validkit.domain.validators.preprocess import prepare_text
from validkit.i18n import t


def _codes(codes: str) -> tuple[str, ...]:
    return tuple(codes.split())


POSTAL_PREFIXES_BY_CITY: dict[str, tuple[str, ...]] = {
    "台北市": _codes("100 103 104 105 106 108 110 111 112 114 115 116"),
    "新北市": _codes(
        "200 201 202 203 204 205 206 207 208 220 221 222 223 224 226 227 228 231 232 233 "
        "234 235 236 237 238 239 241 242 243 244 247 248 249 251 252 253"
    ),
    "基隆市": _codes("200 201 202 203 204 205 206"),
    "桃園市": _codes(
        "300 302 303 304 305 306 307 308 310 311 312 313 314 315 316 317 318 320 324 325 "
        "326 327 328 330 333 334 335 336 337 338"
    ),
    "新竹縣": _codes("300 302 303 304 305 306 307 308 310 311 312 313 314 315"),
    "新竹市": _codes("300"),
    "苗栗縣": _codes("350 351 352 353 354 356 357 358 360 361 362 363 364 365 366 367 368 369"),
    "台中市": _codes(
        "400 401 402 403 404 406 407 408 411 412 413 414 420 421 422 423 424 426 427 428 "
        "429 432 433 434 435 436 437 438 439"
    ),
    "彰化縣": _codes(
        "500 502 503 504 505 506 507 508 509 510 511 512 513 514 515 516 520 521 522 523 "
        "524 525 526 527 528 530"
    ),
    "南投縣": _codes("540 541 542 544 545 546 551 552 553 555 556 557 558"),
    "雲林縣": _codes(
        "630 631 632 633 634 635 636 637 638 640 643 646 647 648 649 651 652 653 654 655"
    ),
    "嘉義縣": _codes(
        "600 602 603 604 605 606 607 608 611 612 613 614 615 616 621 622 623 624 625"
    ),
    "嘉義市": _codes("600"),
    "台南市": _codes(
        "700 701 702 704 708 709 710 711 712 713 714 715 716 717 718 719 720 721 722 723 "
        "724 725 726 727 730 731 732 733 734 735 736 737 741 742 743 744 745"
    ),
    "高雄市": _codes(
        "800 801 802 803 804 805 806 807 811 812 813 814 815 820 821 822 823 824 825 826 "
        "827 828 829 830 831 832 833 840 842 843 844 845 846 847 848 849 851 852"
    ),
    "屏東縣": _codes(
        "900 901 902 903 904 905 906 907 908 909 911 912 913 920 921 922 923 924 925 926 "
        "927 928 929 931 932 940 941 942 943 944 945 946 947"
    ),
    "宜蘭縣": _codes("260 261 262 263 264 265 266 267 268 269"),
    "花蓮縣": _codes("970 971 972 973 974 975 976 977 978 979 981 982 983"),
    "台東縣": _codes("950 951 952 953 954 955 956 957 958 959 961 962 963 964 965 966"),
    "澎湖縣": _codes("880 881 882 883 884 885"),
    "金門縣": _codes("890 891 892 893 894 895 896"),
    "連江縣": _codes("209 210 211 212"),
}

VALID_3_DIGIT_PREFIXES: frozenset[str] = frozenset(
    prefix for prefixes in POSTAL_PREFIXES_BY_CITY.values() for prefix in prefixes
)


@dataclass(frozen=True, slots=True)
class SuffixRange:
    """Inclusive suffix ranges for the 5- and 6-digit formats of one prefix."""

    range5: tuple[int, int] = (1, 99)
    range6: tuple[int, int] = (1, 999)


DEFAULT_SUFFIX_RANGE = SuffixRange()

# Prefixes with a known, narrower numbering; every other prefix uses the default.
POSTAL_CODE_RANGES: dict[str, SuffixRange] = {
    **dict.fromkeys(
        _codes(
            "100 103 104 105 106 108 110 111 112 114 115 116 220 221 222 223 224 320 324 330 "
            "400 401 402 403 404 700 701 702 800 801 802 803"
        ),
        DEFAULT_SUFFIX_RANGE,
    ),
    "880": SuffixRange(range5=(1, 50), range6=(1, 500)),
    "890": SuffixRange(range5=(1, 30), range6=(1, 300)),
    "209": SuffixRange(range5=(1, 20), range6=(1, 200)),
}

_DIGITS_3 = re.compile(r"^\d{3}$", re.ASCII)
_DIGITS = re.compile(r"^\d+$", re.ASCII)
_SEPARATORS = re.compile(r"[-\s]")


class PostalCodeFormat(str, Enum):
    """Accepted postal code lengths."""

    THREE = "3"
    FIVE = "5"
    SIX = "6"
    THREE_OR_FIVE = "3+5"
    THREE_OR_SIX = "3+6"
    FIVE_OR_SIX = "5+6"
    ALL = "all"

    @property
    def lengths(self) -> frozenset[int]:
        return _FORMAT_LENGTHS[self]


_FORMAT_LENGTHS: dict[PostalCodeFormat, frozenset[int]] = {
    PostalCodeFormat.THREE: frozenset({3}),
    PostalCodeFormat.FIVE: frozenset({5}),
    PostalCodeFormat.SIX: frozenset({6}),
    PostalCodeFormat.THREE_OR_FIVE: frozenset({3, 5}),
    PostalCodeFormat.THREE_OR_SIX: frozenset({3, 6}),
    PostalCodeFormat.FIVE_OR_SIX: frozenset({5, 6}),
    PostalCodeFormat.ALL: frozenset({3, 5, 6}),
}


def get_suffix_range(prefix: str) -> SuffixRange:
    return POSTAL_CODE_RANGES.get(prefix, DEFAULT_SUFFIX_RANGE)


def is_valid_postal_prefix(
    prefix: str,
    *,
    strict: bool = True,
    allowed_prefixes: tuple[str, ...] | None = None,
    blocked_prefixes: tuple[str, ...] | None = None,
) -> bool:
    """Validate a 3-digit prefix.

    Blocked prefixes always fail. An explicit ``allowed_prefixes`` list
    replaces the strict table; otherwise strict mode uses
    ``VALID_3_DIGIT_PREFIXES`` and lenient mode accepts 100-999.
    """
    if not _DIGITS_3.match(prefix):
        return False
    if blocked_prefixes and prefix in blocked_prefixes:
        return False
    if allowed_prefixes is not None:
        return prefix in allowed_prefixes
    if strict:
        return prefix in VALID_3_DIGIT_PREFIXES
    return 100 <= int(prefix) <= 999


def is_valid_suffix(code: str) -> bool:
    """Check the suffix of a 5- or 6-digit code against its prefix range."""
    if len(code) not in (5, 6) or not _DIGITS.match(code):
        return False
    ranges = get_suffix_range(code[:3])
    low, high = ranges.range5 if len(code) == 5 else ranges.range6
    return low <= int(code[3:]) <= high


def validate_postal_code(
    value: str,
    postal_format: PostalCodeFormat = PostalCodeFormat.THREE_OR_SIX,
    *,
    strict: bool = True,
    strict_suffix: bool = False,
    allow_dashes: bool = True,
    allowed_prefixes: tuple[str, ...] | None = None,
    blocked_prefixes: tuple[str, ...] | None = None,
) -> bool:
    """Validate a postal code in any of the formats allowed by ``postal_format``.

    Example:
        >>> validate_postal_code("100-001")
        True
        >>> validate_postal_code("10001")  # 5 digits not allowed by "3+6"
        False
    """
    if not value:
        return False
    if _SEPARATORS.search(value):
        if not allow_dashes:
            return False
        value = _SEPARATORS.sub("", value)

    if len(value) not in PostalCodeFormat(postal_format).lengths or not _DIGITS.match(value):
        return False
    if not is_valid_postal_prefix(
        value[:3],
        strict=strict,
        allowed_prefixes=allowed_prefixes,
        blocked_prefixes=blocked_prefixes,
    ):
        return False
    return len(value) == 3 or not strict_suffix or is_valid_suffix(value)


@dataclass(frozen=True, slots=True, kw_only=True)
class PostalCodeInfo:
    """Breakdown of a postal code.

    Attributes:
        code: Code without separators.
        format: ``"3"``, ``"5"`` or ``"6"``.
        prefix: District prefix.
        suffix: Delivery suffix (empty for 3-digit codes).
        cities: Cities the prefix is listed under.
        is_legacy: True for the 5-digit format.
    """

    code: str
    format: str
    prefix: str
    suffix: str
    cities: tuple[str, ...]
    is_legacy: bool


def get_postal_code_info(value: str) -> PostalCodeInfo | None:
    """Describe a postal code, or return None when it is not a valid code.

    Example:
        >>> get_postal_code_info("100-001").cities
        ('台北市',)
    """
    code = _SEPARATORS.sub("", value.strip())
    if not validate_postal_code(code, PostalCodeFormat.ALL):
        return None
    prefix = code[:3]
    return PostalCodeInfo(
        code=code,
        format=str(len(code)),
        prefix=prefix,
        suffix=code[3:],
        cities=tuple(
            city for city, prefixes in POSTAL_PREFIXES_BY_CITY.items() if prefix in prefixes
        ),
        is_legacy=len(code) == 5,
    )


class PostalCodeOptions(ValidatorOptions):
    """Options for ``postal_code``.

    Attributes:
        format: Accepted lengths.
        strict_validation: Check prefixes against the known-prefix table.
        allow_dashes: Accept and strip ``-`` and spaces (``100-001``).
        warn_5_digit: Log a warning when a legacy 5-digit code is accepted.
        allowed_prefixes: Explicit prefix allowlist (replaces the table).
        blocked_prefixes: Prefixes that always fail.
        strict_suffix_validation: Check suffixes against ``POSTAL_CODE_RANGES``.
        deprecate_5_digit: Reject 5-digit codes with ``deprecated5Digit``.
    """

    format: PostalCodeFormat = PostalCodeFormat.THREE_OR_SIX
    strict_validation: bool = True
    allow_dashes: bool = True
    warn_5_digit: bool = True
    allowed_prefixes: tuple[str, ...] | None = None
    blocked_prefixes: tuple[str, ...] | None = None
    strict_suffix_validation: bool = False
    deprecate_5_digit: bool = False
    default_value: str | None = None


def postal_code(options: PostalCodeOptions | None = None, **kwargs: Any) -> Validator[str]:
    """Build a Taiwan postal code validator.

    Keys, in evaluation order: ``required``, ``format3Only`` /
    ``format5Only`` / ``format6Only``, ``deprecated5Digit``,
    ``invalidSuffix``, ``invalid``.
    """
    opts = resolve_options(PostalCodeOptions, options, kwargs)
    logger = get_logger()

    def preprocess(value: Any) -> str | None:
        text = prepare_text(value, required=opts.required, default=opts.default_value)
        if text and opts.allow_dashes:
            text = _SEPARATORS.sub("", text)
            if text == "":
                return "" if opts.required else None
        if text and opts.transform is not None:
            text = opts.transform(text)
        return text

    def clean(value: str) -> str:
        return _SEPARATORS.sub("", value)

    def check_suffix(value: str) -> bool:
        code = clean(value)
        return len(code) not in (5, 6) or not _DIGITS.match(code) or is_valid_suffix(code)

    def warn_legacy(value: str) -> str:
        if opts.warn_5_digit and len(clean(value)) == 5 and opts.format != PostalCodeFormat.FIVE:
            logger.warning(
                "legacy_5_digit_postal_code",
                postal_code=value,
                detail=t("taiwan.postal_code.legacy5DigitWarning"),
            )
        return value

    rules: list[Rule] = []
    single_format_keys = {
        PostalCodeFormat.THREE: ("format3Only", 3),
        PostalCodeFormat.FIVE: ("format5Only", 5),
        PostalCodeFormat.SIX: ("format6Only", 6),
    }
    if opts.format in single_format_keys:
        key, length = single_format_keys[opts.format]
        rules.append(Rule(key, lambda v, n=length: len(clean(v)) == n))
    if opts.deprecate_5_digit:
        rules.append(Rule("deprecated5Digit", lambda v: len(clean(v)) != 5))
    if opts.strict_suffix_validation:
        rules.append(Rule("invalidSuffix", check_suffix))
    rules.append(
        Rule(
            "invalid",
            lambda v: validate_postal_code(
                v,
                opts.format,
                strict=opts.strict_validation,
                strict_suffix=opts.strict_suffix_validation,
                allow_dashes=opts.allow_dashes,
                allowed_prefixes=opts.allowed_prefixes,
                blocked_prefixes=opts.blocked_prefixes,
            ),
        )
    )

    return Validator(
        "postal_code",
        namespace="taiwan.postal_code",
        required=opts.required,
        preprocess=preprocess,
        rules=rules,
        finalize=None if opts.deprecate_5_digit else warn_legacy,
        messages=opts.messages,
    )
