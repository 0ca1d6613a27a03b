"""
Conversion between human-readable number and duration strings and
numeric values.

.. testsetup:: *

    from humanfmt import *

"""
from __future__ import annotations

from .common import logger
from .error import FormattingError, InvalidFormat, InvalidSuffix, InvalidUnit
from .number import comma_format, abbreviate, GroupingFormatter, AbbreviationFormatter
from .suffix import parse_abbreviated, SuffixTable, SuffixParser, SuffixPatternCache, DEFAULT_SUFFIXES
from .duration import (
    to_seconds,
    to_remaining_time,
    to_long_remaining_time,
    DurationParser,
    RemainingTimeFormatter,
    TimeUnit,
    TIME_UNITS,
)

__version__ = "1.0.0"
