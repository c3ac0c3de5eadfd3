"""Taiwan landline numbering plans.

Each area code fixes the allowed total length of the number (area code
included) and, for some codes, the allowed first digit of the subscriber
number. Codes are matched longest prefix first, so ``037`` wins over ``03``.

Two plans are kept. They are NOT reconciled:

- ``TELEPHONE_PLAN``: the plan used for voice lines. Includes toll-free
  ``0800``/``0809`` and accepts 5 or 6 subscriber digits for Matsu (0836).
- ``FAX_PLAN``: the 2024 plan used for fax lines. Tighter first-digit ranges
  (``02[235-8]``, ``082[2-57-9]``), fixed lengths, Wuqiu (0826) and no
  toll-free codes.

The two disagree for several codes (for example ``0249876543`` is a valid
telephone number but not a valid fax number, and ``049`` is 9-10 digits in
one plan and 10 in the other).
"""

import re
from dataclasses import dataclass

_SEPARATORS = re.compile(r"[-\s]")
_BASIC = re.compile(r"^0\d{7,10}$", re.ASCII)


@dataclass(frozen=True, slots=True, kw_only=True)
class AreaCode:
    """Length and first-digit constraints for one area code.

    Attributes:
        prefix: Area code including the trunk prefix ``0``.
        lengths: Allowed total lengths (area code + subscriber number).
        first_digits: Allowed first subscriber digits, or None for any digit.
        region: Region served, for documentation.
    """

    prefix: str
    lengths: frozenset[int]
    first_digits: str | None = None
    region: str = ""

    def matches(self, number: str) -> bool:
        if len(number) not in self.lengths:
            return False
        if self.first_digits is None:
            return True
        first = number[len(self.prefix) : len(self.prefix) + 1]
        return first != "" and first in self.first_digits


def _plan(*codes: AreaCode) -> tuple[AreaCode, ...]:
    return tuple(sorted(codes, key=lambda code: len(code.prefix), reverse=True))


TELEPHONE_PLAN: tuple[AreaCode, ...] = _plan(
    AreaCode(prefix="0800", lengths=frozenset({10}), region="Toll-free"),
    AreaCode(prefix="0809", lengths=frozenset({10}), region="Toll-free"),
    AreaCode(prefix="0836", lengths=frozenset({9, 10}), region="Matsu"),
    AreaCode(prefix="037", lengths=frozenset({9, 10}), first_digits="23456789", region="Miaoli"),
    AreaCode(prefix="049", lengths=frozenset({9, 10}), region="Nantou"),
    AreaCode(prefix="082", lengths=frozenset({9}), region="Kinmen"),
    AreaCode(prefix="089", lengths=frozenset({9}), region="Taitung"),
    AreaCode(prefix="02", lengths=frozenset({10}), first_digits="23456789", region="Taipei"),
    AreaCode(prefix="03", lengths=frozenset({9, 10}), region="Taoyuan, Hsinchu, Yilan, Hualien"),
    AreaCode(prefix="04", lengths=frozenset({9, 10}), region="Taichung, Changhua"),
    AreaCode(prefix="05", lengths=frozenset({9}), region="Yunlin, Chiayi"),
    AreaCode(prefix="06", lengths=frozenset({9}), region="Tainan"),
    AreaCode(prefix="07", lengths=frozenset({9, 10}), first_digits="23456789", region="Kaohsiung"),
    AreaCode(prefix="08", lengths=frozenset({9}), first_digits="478", region="Pingtung"),
)

FAX_PLAN: tuple[AreaCode, ...] = _plan(
    AreaCode(prefix="0826", lengths=frozenset({9}), first_digits="6", region="Wuqiu"),
    AreaCode(prefix="0836", lengths=frozenset({9}), first_digits="23456789", region="Matsu"),
    AreaCode(prefix="037", lengths=frozenset({9}), first_digits="23456789", region="Miaoli"),
    AreaCode(prefix="049", lengths=frozenset({10}), first_digits="23456789", region="Nantou"),
    AreaCode(prefix="082", lengths=frozenset({9}), first_digits="2345789", region="Kinmen"),
    AreaCode(prefix="089", lengths=frozenset({9}), first_digits="23456789", region="Taitung"),
    AreaCode(prefix="02", lengths=frozenset({10}), first_digits="235678", region="Taipei"),
    AreaCode(prefix="03", lengths=frozenset({9}), region="Taoyuan, Hsinchu, Yilan, Hualien"),
    AreaCode(prefix="04", lengths=frozenset({9}), region="Taichung, Changhua"),
    AreaCode(prefix="05", lengths=frozenset({9}), region="Yunlin, Chiayi"),
    AreaCode(prefix="06", lengths=frozenset({9}), region="Tainan"),
    AreaCode(prefix="07", lengths=frozenset({9}), first_digits="23456789", region="Kaohsiung"),
    AreaCode(prefix="08", lengths=frozenset({9}), first_digits="478", region="Pingtung"),
)


def strip_separators(value: str) -> str:
    """Remove dashes and whitespace."""
    return _SEPARATORS.sub("", value)


def find_area_code(number: str, plan: tuple[AreaCode, ...]) -> AreaCode | None:
    """Return the longest area code of ``plan`` that prefixes ``number``."""
    for code in plan:
        if number.startswith(code.prefix):
            return code
    return None


def matches_plan(value: str, plan: tuple[AreaCode, ...]) -> bool:
    """Check a landline number against a numbering plan.

    Separators are ignored. The number must be ``0`` followed by 7-10 digits
    and satisfy the rule of its area code.

    Example:
        >>> matches_plan("02-2345-6789", TELEPHONE_PLAN)
        True
        >>> matches_plan("0213456789", TELEPHONE_PLAN)
        False
    """
    number = strip_separators(value)
    if not _BASIC.match(number):
        return False
    code = find_area_code(number, plan)
    return code is not None and code.matches(number)
