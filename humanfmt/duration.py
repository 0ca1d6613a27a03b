"""
Module for converting durations between seconds and text: short remaining
time strings ("1h 5m 10s"), clock-like strings ("01:05:10") and the other
way around.

.. testsetup:: *

    from humanfmt.duration import to_seconds, to_remaining_time, to_long_remaining_time

"""
from __future__ import annotations

import re
import typing as t
from dataclasses import dataclass
from math import floor
from types import MappingProxyType

from .common import NT, logger
from .error import InvalidFormat, InvalidUnit


@dataclass(frozen=True)
class TimeUnit:
    """
    :param name:       Singular unit name.
    :param in_seconds: How many seconds the (single) unit contains.
    :param short:      Short form, first letter of ``name`` if omitted.
    """

    name: str
    in_seconds: int
    short: str = None

    def __post_init__(self):
        if not self.short:
            object.__setattr__(self, "short", self.name[0])

    @property
    def literals(self) -> t.Tuple[str, ...]:
        return self.short, self.name, self.name + "s"


SECOND = TimeUnit("second", 1)
MINUTE = TimeUnit("minute", 60)
HOUR = TimeUnit("hour", 3600)
DAY = TimeUnit("day", 86400)
WEEK = TimeUnit("week", 604800)

TIME_UNITS: t.Mapping[str, int] = MappingProxyType({
    literal: unit.in_seconds
    for unit in (SECOND, MINUTE, HOUR, DAY, WEEK)
    for literal in unit.literals
})
"""
Unit literal to multiplier (in seconds) mapping used by `to_seconds()`.
Literals are case-sensitive.
"""


class DurationParser:
    """
    Convert duration strings like "10m 20s" or "1 day 2 hours" into amount of
    seconds. Whitespace is ignored, units can follow in any order and can
    repeat (the values are summed up). Anything else between the tokens
    makes the whole string invalid.

    A unit word missing in the table is accepted if it abbreviates one of the
    unit names, optionally with plural "s": it should be at least two letters
    long, start with the same letter and keep the order of the letters of the
    name. Thus "sec", "mins", "hrs" and "wk" are understood, while "ms" and
    "months" are not.

    :param units: Unit literal to multiplier mapping.
    """

    NUMERAL_REGEX = re.compile(r"^[-+]?(?:\d+(?:\.\d*)?|\.\d+)$")
    TOKEN_REGEX = re.compile(r"(?P<value>\d+)(?P<unit>[A-Za-z]+)")
    TOKENS_REGEX = re.compile(r"(?:\d+[A-Za-z]+)+")
    WHITESPACE_REGEX = re.compile(r"\s+")

    def __init__(self, units: t.Mapping[str, int] = TIME_UNITS):
        self._units: t.Mapping[str, int] = units
        # literals having a plural form in the table are the full unit names
        self._names: t.Tuple[str, ...] = tuple(
            literal for literal in units if len(literal) > 1 and literal + "s" in units
        )

    def parse(self, val: str) -> NT:
        """
        :param val: Duration string, or a plain number of seconds.
        :raises InvalidUnit:   If a unit is not found in the table.
        :raises InvalidFormat: If ``val`` is neither a number nor a sequence
                               of duration tokens.
        """
        stripped = val.strip()
        if self.NUMERAL_REGEX.match(stripped):
            if "." in stripped:
                return float(stripped)
            return int(stripped)

        compact = self.WHITESPACE_REGEX.sub("", val)
        if not compact:
            raise InvalidFormat(val, "no duration tokens found")
        if not self.TOKENS_REGEX.fullmatch(compact):
            raise InvalidFormat(val, "malformed duration")

        seconds = 0
        for match in self.TOKEN_REGEX.finditer(compact):
            value, unit = match.group("value", "unit")
            seconds += int(value) * self._resolve_unit(val, unit)
        return seconds

    def _resolve_unit(self, val: str, unit: str) -> int:
        multiplier = self._units.get(unit)
        if multiplier is None:
            multiplier = self._resolve_abbreviation(unit)
        if multiplier is None:
            raise InvalidUnit(val, unit)
        return multiplier

    def _resolve_abbreviation(self, unit: str) -> int | None:
        if len(unit) > 2 and unit.endswith("s"):
            unit = unit[:-1]
        if len(unit) < 2:
            return None

        multipliers = {self._units[name] for name in self._names if _is_abbreviation(unit, name)}
        if len(multipliers) != 1:
            return None
        return multipliers.pop()


def _is_abbreviation(abbr: str, name: str) -> bool:
    if abbr[0] != name[0]:
        return False
    letters = iter(name)
    return all(c in letters for c in abbr)


parser_duration = DurationParser()


def to_seconds(val: str) -> NT:
    """
    Convert remaining time string into the amount of seconds it represents.

    >>> to_seconds("10m 20s")
    620
    >>> to_seconds("1d 2h 3m 2s")
    93782
    >>> to_seconds("30")
    30

    :param val: Duration string, or a plain number of seconds.
    :raises InvalidUnit:   If a unit is not recognized.
    :raises InvalidFormat: If ``val`` is empty or malformed.
    """
    return parser_duration.parse(val)


class RemainingTimeFormatter:
    """
    Break down the amount of seconds into days, hours, minutes and seconds
    and print the non-zero ones, e.g. "5m 10s". Each unit has its own
    template with a single integer placeholder. Zero results in an empty
    string; negative values are treated as zero.

    :param seconds_format: Template for seconds.
    :param minutes_format: Template for minutes.
    :param hours_format:   Template for hours.
    :param days_format:    Template for days.
    :param separator:      String to join the parts with.
    """

    def __init__(
        self,
        seconds_format: str = "%ds",
        minutes_format: str = "%dm",
        hours_format: str = "%dh",
        days_format: str = "%dd",
        separator: str = " ",
    ):
        self._seconds_format = seconds_format
        self._minutes_format = minutes_format
        self._hours_format = hours_format
        self._days_format = days_format
        self._separator = separator

    def format(self, seconds: float) -> str:
        seconds = floor(_ensure_non_negative(seconds))

        days, seconds = divmod(seconds, DAY.in_seconds)
        hours, seconds = divmod(seconds, HOUR.in_seconds)
        minutes, seconds = divmod(seconds, MINUTE.in_seconds)

        parts = [
            template % value
            for template, value in (
                (self._days_format, days),
                (self._hours_format, hours),
                (self._minutes_format, minutes),
                (self._seconds_format, seconds),
            )
            if value > 0
        ]
        return self._separator.join(parts).strip()


formatter_remaining_time = RemainingTimeFormatter()


def to_remaining_time(
    seconds: float,
    seconds_format: str = "%ds",
    minutes_format: str = "%dm",
    hours_format: str = "%dh",
    days_format: str = "%dd",
) -> str:
    """
    >>> to_remaining_time(310)
    '5m 10s'
    >>> to_remaining_time(3910)
    '1h 5m 10s'
    >>> to_remaining_time(90061, "%d sec", "%d min", "%d hr", "%d day")
    '1 day 1 hr 1 min 1 sec'

    :param seconds:        Value to format.
    :param seconds_format: Template for seconds.
    :param minutes_format: Template for minutes.
    :param hours_format:   Template for hours.
    :param days_format:    Template for days.
    """
    formatter = formatter_remaining_time
    templates = (seconds_format, minutes_format, hours_format, days_format)
    if templates != ("%ds", "%dm", "%dh", "%dd"):
        formatter = RemainingTimeFormatter(*templates)
    return formatter.format(seconds)


def to_long_remaining_time(seconds: float) -> str:
    """
    Format the amount of seconds as "HH:MM:SS". Hours are not wrapped at 24;
    values of 100 hours and more widen the hours field.

    >>> to_long_remaining_time(3690)
    '01:01:30'
    >>> to_long_remaining_time(360000)
    '100:00:00'

    :param seconds: Value to format.
    """
    seconds = floor(_ensure_non_negative(seconds))
    hours, seconds = divmod(seconds, HOUR.in_seconds)
    minutes, seconds = divmod(seconds, MINUTE.in_seconds)
    return "%02d:%02d:%02d" % (hours, minutes, seconds)


def _ensure_non_negative(seconds: float) -> float:
    if seconds < 0:
        logger.warning(f"Negative duration: {seconds}, treating as zero")
        return 0
    return seconds
