"""
Number formatting: digit grouping ("1,000,000") and abbreviation with
magnitude suffixes ("1.5M").

.. testsetup:: *

    from humanfmt.number import comma_format, abbreviate

"""
from __future__ import annotations

import re
import typing as t
from math import floor, isfinite, log

from .common import logger
from .suffix import DEFAULT_SUFFIXES, SuffixTable


def comma_format(
    val: int | float | str, minimum: float = None, separator: str = ",", decimal: str = "."
) -> str:
    """
    Place ``separator`` between every three digits of the integer part of
    ``val``. Fractional part is kept as is, no rounding is performed.

    >>> comma_format(1000000)
    '1,000,000'
    >>> comma_format(1000000.123)
    '1,000,000.123'
    >>> comma_format(99999, 100000)
    '99999'
    >>> comma_format("1234567,89", separator=".", decimal=",")
    '1.234.567,89'

    :param val:       Number or its textual representation.
    :param minimum:   If ``val`` is less than this number, return it as a string
                      without grouping.
    :param separator: Group separator.
    :param decimal:   Decimal separator.
    """
    return GroupingFormatter(separator, decimal).format(val, minimum)


class GroupingFormatter:
    """
    Split integer part of a number into groups of three digits. Grouping is
    purely lexical -- the formatter works with digit string and never alters
    the precision of the input. Leading sign is kept outside the groups.

    :param separator: String to place between the groups.
    :param decimal:   Decimal separator of the input (and the output).
    """

    GROUP_REGEX = re.compile(r"(\d{3})(?=\d)")

    def __init__(self, separator: str = ",", decimal: str = "."):
        self._separator: str = separator
        self._decimal: str = decimal

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def decimal(self) -> str:
        return self._decimal

    def format(self, val: int | float | str, minimum: float = None) -> str:
        val_str = str(val)
        if minimum is not None:
            num = self._to_number(val)
            if num is not None and num < minimum:
                return val_str

        sign = ""
        if val_str[:1] in ("-", "+"):
            sign, val_str = val_str[:1], val_str[1:]

        int_part, _, frac_part = val_str.partition(self._decimal)
        # groups are counted from the least significant digit
        grouped = self.GROUP_REGEX.sub(lambda m: m.group(1) + self._separator[::-1], int_part[::-1])
        result = sign + grouped[::-1]

        if frac_part:
            result += self._decimal + frac_part
        return result

    def _to_number(self, val: int | float | str) -> float | None:
        if isinstance(val, (int, float)):
            return val
        try:
            return float(str(val).replace(self._decimal, "."))
        except ValueError:
            return None


class AbbreviationFormatter:
    """
    Shorten the numbers larger than or equal to ``threshold`` by dividing
    them by a power of 1000 and appending corresponding suffix, e.g.
    "1.56M" instead of 1560000. Smaller numbers are grouped instead.

    Numeric part of the result is rounded to ``precision`` decimal digits,
    trailing zeros are dropped. Values exceeding the largest tier of the
    suffix table are printed without a suffix.

    :param threshold: Minimum value to abbreviate.
    :param suffixes:  Suffix table, `DEFAULT_SUFFIXES` if omitted.
    :param precision: Max amount of decimal digits.
    :param grouping:  Formatter for values below ``threshold``.
    """

    def __init__(
        self,
        threshold: float = 1000,
        suffixes: SuffixTable | t.Iterable[str] = DEFAULT_SUFFIXES,
        precision: int = 3,
        grouping: GroupingFormatter = None,
    ):
        self._threshold: float = threshold
        self._suffixes: SuffixTable = SuffixTable.of(suffixes)
        self._precision: int = precision
        self._grouping: GroupingFormatter = grouping or GroupingFormatter()

    @property
    def threshold(self) -> float:
        return self._threshold

    @property
    def suffixes(self) -> SuffixTable:
        return self._suffixes

    def format(self, val: int | float) -> str:
        if val < self._threshold or val <= 0 or (isinstance(val, float) and not isfinite(val)):
            return self._grouping.format(val)

        tier = self._find_tier(val)
        base_str = self._format_base(val / self._suffixes.multiplier(tier))
        if float(base_str) >= 1000:
            # e.g. 999999.9 -> "1000K", should be "1M" instead
            tier += 1
            base_str = self._format_base(val / self._suffixes.multiplier(tier))

        if tier < 0:
            return base_str

        suffix = self._suffixes.get(tier)
        if suffix is None:
            logger.warning(
                "Value %s exceeds the largest tier of suffix table (%d), "
                "no suffix applied" % (val, len(self._suffixes))
            )
            return base_str
        return base_str + suffix

    def _find_tier(self, val: int | float) -> int:
        # rounding is required because of floating point error:
        # log(10**15, 1000) = 4.999999999999999 -> "1000T" (expected "1Qd")
        tier = max(-1, floor(round(log(val, 1000), 9)) - 1)

        # and this is for the values that are just a hair from the
        # boundary, where rounding works the other way around
        while tier >= 0 and val < self._suffixes.multiplier(tier):
            tier -= 1
        while val >= self._suffixes.multiplier(tier + 1):
            tier += 1
        return tier

    def _format_base(self, base: float) -> str:
        result = f"{base:.{self._precision}f}"
        if "." in result:
            result = result.rstrip("0").rstrip(".")
        return result


formatter_abbreviation = AbbreviationFormatter()
"""
Default abbreviation formatter with threshold of 1000 and `DEFAULT_SUFFIXES`.

:see: `abbreviate()`
"""


def abbreviate(
    val: int | float,
    threshold: float = 1000,
    suffixes: SuffixTable | t.Iterable[str] = DEFAULT_SUFFIXES,
) -> str:
    """
    Wrapper for `formatter_abbreviation.format()<formatter_abbreviation>`;
    a new formatter is created if settings differ from the default ones.

    >>> abbreviate(999)
    '999'
    >>> abbreviate(1500000)
    '1.5M'
    >>> abbreviate(1000000000000000000)
    '1Qt'

    :param val:       Value to format.
    :param threshold: Minimum value to abbreviate, lesser ones are grouped instead.
    :param suffixes:  Suffix table override.
    """
    formatter = formatter_abbreviation
    if threshold != formatter.threshold or SuffixTable.of(suffixes) != formatter.suffixes:
        formatter = AbbreviationFormatter(threshold, suffixes)
    return formatter.format(val)
