"""
Magnitude suffixes ("K", "M", "B", ...) and parsing of abbreviated numbers
back into numeric values.

.. testsetup:: *

    from humanfmt.suffix import parse_abbreviated

"""
from __future__ import annotations

import re
import threading
import typing as t
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from .common import NT, logger
from .error import InvalidFormat, InvalidSuffix


@dataclass(frozen=True)
class SuffixTable:
    """
    Immutable ordered list of suffix tags. Tag at index *i* denotes the
    multiplier :math:`10^{3(i+1)}`, i.e. the first tag is for thousands,
    the second one is for millions, etc.

    Tags must be non-empty and unique (case-insensitively), and must not
    start with a digit or a point, as those would merge into the numeral.
    Tables are compared and hashed by content, therefore two tables with the
    same tags are interchangeable.

    :param tags: Tags in order of increasing magnitude.
    """

    tags: t.Tuple[str, ...]
    _index_map: t.Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        tags = tuple(self.tags)
        if not tags:
            raise ValueError("Suffix table should contain at least one tag")

        index_map = dict()
        for idx, tag in enumerate(tags):
            if not isinstance(tag, str) or not tag:
                raise ValueError(f"Invalid suffix tag at index {idx}: {tag!r}")
            if tag[0].isdigit() or tag[0] == ".":
                raise ValueError(f"Suffix tag should not start with a numeral char: {tag!r}")
            if tag.lower() in index_map:
                raise ValueError(f"Duplicate suffix tag (case-insensitive): {tag!r}")
            index_map[tag.lower()] = idx

        object.__setattr__(self, "tags", tags)
        object.__setattr__(self, "_index_map", index_map)

    @classmethod
    def of(cls, suffixes: SuffixTable | t.Iterable[str]) -> SuffixTable:
        if isinstance(suffixes, cls):
            return suffixes
        return cls(tuple(suffixes))

    def __len__(self) -> int:
        return len(self.tags)

    def __iter__(self) -> t.Iterator[str]:
        return iter(self.tags)

    def get(self, idx: int) -> str | None:
        """
        :return: Tag for tier ``idx``, or *None* if there is no such tier.
        """
        if 0 <= idx < len(self.tags):
            return self.tags[idx]
        return None

    def index(self, tag: str) -> int:
        """
        Case-insensitive tag lookup.

        :return: Tier index of the ``tag``, or -1 if it's not in the table.
        """
        return self._index_map.get(tag.lower(), -1)

    @staticmethod
    def multiplier(idx: int) -> int:
        return 10 ** (3 * (idx + 1))


# fmt: off
DEFAULT_SUFFIXES = SuffixTable((
    "K",
    "M", "B", "T", "Qd", "Qt", "Sx", "Sp", "Oc", "No", "Dc",
    "Udc", "Ddc", "Tdc", "Qdc", "Qnd", "Sxd", "Spd", "Ocd", "Nvd", "Vg",
    "Uvg", "Dvg", "Tvg", "Qvg", "Qnv", "Sxv", "Spv", "Ocv", "Nvv", "Tg",
    "Utg", "G",
))
# fmt: on
"""
Suffix preset used by `abbreviate()` and `parse_abbreviated()`. Covers
values up to :math:`10^{99}` and beyond.
"""


class SuffixPatternCache:
    """
    Compiled case-insensitive patterns matching any tag of a suffix table,
    built lazily once per distinct table. Every letter of a tag is written as
    an upper/lower case alternative, so that "Qd" becomes ``[Qq][Dd]``.

    Access is guarded by a lock; concurrent population of the same key
    is harmless, as the results are equal.
    """

    def __init__(self):
        self._patterns: t.Dict[SuffixTable, t.Pattern] = dict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, suffixes: SuffixTable) -> bool:
        return suffixes in self._patterns

    def get(self, suffixes: SuffixTable) -> t.Pattern:
        pattern = self._patterns.get(suffixes)
        if pattern is None:
            pattern = self._compile(suffixes)
            with self._lock:
                pattern = self._patterns.setdefault(suffixes, pattern)
        return pattern

    def clear(self):
        with self._lock:
            self._patterns.clear()

    @staticmethod
    def _compile(suffixes: SuffixTable) -> t.Pattern:
        alternatives = []
        for tag in suffixes:
            alternatives.append("".join(
                f"[{c.upper()}{c.lower()}]" if c.isalpha() else re.escape(c)
                for c in tag
            ))
        logger.debug("Building suffix pattern for %d tags", len(alternatives))
        return re.compile("|".join(alternatives))


pattern_cache = SuffixPatternCache()
pattern_cache.get(DEFAULT_SUFFIXES)


class SuffixParser:
    """
    Parse numbers formatted by `abbreviate()` back into a numeric type.
    Grouping separators are ignored, suffix case is not important.

    :param suffixes:  Suffix table to look the tags up in.
    :param separator: Grouping separator to strip before parsing.
    :param cache:     Pattern cache to use, shared module instance by default.
    """

    ABBREVIATED_REGEX = re.compile(r"^(?P<numeral>[0-9.]+)(?P<suffix>.*)$")

    def __init__(
        self,
        suffixes: SuffixTable | t.Iterable[str] = DEFAULT_SUFFIXES,
        separator: str = ",",
        cache: SuffixPatternCache = None,
    ):
        self._suffixes: SuffixTable = SuffixTable.of(suffixes)
        self._separator: str = separator
        self._cache: SuffixPatternCache = cache if cache is not None else pattern_cache

    @property
    def suffixes(self) -> SuffixTable:
        return self._suffixes

    def parse(self, val: str) -> NT:
        """
        :param val: Abbreviated number, e.g. "1.5M" or "100k".
        :return:    *int* if result is integral, *float* otherwise.
        :raises InvalidFormat: If ``val`` is not a number with optional suffix.
        :raises InvalidSuffix: If the suffix is not found in the table.
        """
        normalized = val.replace(self._separator, "").strip() if self._separator else val.strip()
        match = self.ABBREVIATED_REGEX.match(normalized)
        if not match:
            raise InvalidFormat(val)

        numeral, suffix = match.group("numeral", "suffix")
        try:
            num = Decimal(numeral)
        except InvalidOperation:
            raise InvalidFormat(val, f"malformed numeral {numeral!r}") from None

        if suffix:
            if not self._cache.get(self._suffixes).fullmatch(suffix):
                raise InvalidSuffix(val, suffix)
            num = num.scaleb(3 * (self._suffixes.index(suffix) + 1))

        if num == num.to_integral_value():
            return int(num)
        return float(num)


parser_suffix = SuffixParser()


def parse_abbreviated(val: str, suffixes: SuffixTable | t.Iterable[str] = DEFAULT_SUFFIXES) -> NT:
    """
    Parse a number formatted by `abbreviate()` back into a number.

    >>> parse_abbreviated("1B")
    1000000000
    >>> parse_abbreviated("1.5m")
    1500000
    >>> parse_abbreviated("12,345")
    12345

    :param val:      Abbreviated number.
    :param suffixes: Suffix table override.
    :raises InvalidFormat: If ``val`` is not a number with optional suffix.
    :raises InvalidSuffix: If the suffix is not found in the table.
    """
    parser = parser_suffix
    if SuffixTable.of(suffixes) != parser.suffixes:
        parser = SuffixParser(suffixes)
    return parser.parse(val)
