import unittest

from humanfmt import comma_format, abbreviate, parse_abbreviated, DEFAULT_SUFFIXES, SuffixTable
from humanfmt.number import GroupingFormatter, AbbreviationFormatter


class CommaFormatTestCase(unittest.TestCase):
    def test_grouping(self):
        for val, expected in [
            (0, '0'),
            (999, '999'),
            (1000, '1,000'),
            (100000, '100,000'),
            (1000000, '1,000,000'),
            (1234567890, '1,234,567,890'),
        ]:
            with self.subTest(val=val):
                self.assertEqual(expected, comma_format(val))

    def test_fractional_part_is_kept_as_is(self):
        self.assertEqual('1,000,000.123', comma_format(1000000.123))
        self.assertEqual('1,234.5', comma_format('1234.5'))

    def test_minimum(self):
        self.assertEqual('99999', comma_format(99999, 100000))
        self.assertEqual('100,000', comma_format(100000, 100000))
        self.assertEqual('99999', comma_format('99999', 100000))

    def test_custom_separators(self):
        self.assertEqual('1 000 000', comma_format(1000000, separator=' '))
        self.assertEqual('1.234.567,89', comma_format('1234567,89', separator='.', decimal=','))

    def test_multichar_separator(self):
        self.assertEqual("1'_'000'_'000", comma_format(1000000, separator="'_'"))

    def test_sign_is_kept_outside_of_groups(self):
        self.assertEqual('-100', comma_format(-100))
        self.assertEqual('-1,000', comma_format(-1000))
        self.assertEqual('-9,123,123,123.55', comma_format(-9123123123.55))
        self.assertEqual('+1,000', comma_format('+1000'))

    def test_non_numeric_text_is_not_an_error(self):
        self.assertEqual('abc', comma_format('abc', 1000))


class GroupingFormatterTestCase(unittest.TestCase):
    def test_properties(self):
        formatter = GroupingFormatter('_', ',')
        self.assertEqual('_', formatter.separator)
        self.assertEqual(',', formatter.decimal)
        self.assertEqual('12_345,6', formatter.format('12345,6'))


class AbbreviateTestCase(unittest.TestCase):
    def test_abbreviate(self):
        for val, expected in [
            (1_000, '1K'),
            (100_000, '100K'),
            (1_000_000, '1M'),
            (1_500_000, '1.5M'),
            (1_560_000, '1.56M'),
            (1_567_000, '1.567M'),
            (1_568_000, '1.568M'),
            (1_000_000_000, '1B'),
            (1_000_000_000_000_000_000, '1Qt'),
        ]:
            with self.subTest(val=val):
                self.assertEqual(expected, abbreviate(val))

    def test_below_threshold_is_grouped(self):
        self.assertEqual('999', abbreviate(999))
        self.assertEqual('9,999', abbreviate(9999, threshold=10000))
        self.assertEqual('10K', abbreviate(10000, threshold=10000))

    def test_threshold_below_thousand(self):
        self.assertEqual('500', abbreviate(500, threshold=100))
        self.assertEqual('999.5', abbreviate(999.5, threshold=100))

    def test_rounding(self):
        self.assertEqual('1.235K', abbreviate(1234.5678))
        self.assertEqual('1M', abbreviate(999_999.9))
        self.assertEqual('1B', abbreviate(999_999_999.9))

    def test_tier_boundaries(self):
        for idx, suffix in enumerate(DEFAULT_SUFFIXES):
            val = 10 ** (3 * (idx + 1))
            with self.subTest(suffix=suffix):
                self.assertEqual('1' + suffix, abbreviate(val))
                self.assertEqual('1' + suffix, abbreviate(float(val)))
                self.assertEqual('999' + (DEFAULT_SUFFIXES.get(idx - 1) or ''), abbreviate(val - val // 1000))

    def test_round_trip(self):
        for idx in range(len(DEFAULT_SUFFIXES)):
            val = 10 ** (3 * (idx + 1))
            with self.subTest(val=val):
                self.assertEqual(val, parse_abbreviated(abbreviate(val)))

    def test_beyond_largest_tier(self):
        with self.assertLogs('humanfmt', level='WARNING'):
            self.assertEqual('1', abbreviate(10 ** 102))

    def test_custom_suffixes(self):
        self.assertEqual('2.5k', abbreviate(2500, suffixes=['k', 'm']))
        self.assertEqual('3m', abbreviate(3_000_000, suffixes=SuffixTable(('k', 'm'))))

    def test_not_finite(self):
        self.assertEqual('inf', abbreviate(float('inf')))
        self.assertEqual('nan', abbreviate(float('nan')))

    def test_negative_is_grouped(self):
        self.assertEqual('-5,000,000', abbreviate(-5_000_000))


class AbbreviationFormatterTestCase(unittest.TestCase):
    def test_precision(self):
        formatter = AbbreviationFormatter(precision=1)
        self.assertEqual('1.2M', formatter.format(1_234_567))
        self.assertEqual('2M', formatter.format(1_960_000))

    def test_zero_precision(self):
        formatter = AbbreviationFormatter(precision=0)
        self.assertEqual('100K', formatter.format(100_000))

    def test_custom_grouping(self):
        formatter = AbbreviationFormatter(threshold=10 ** 6, grouping=GroupingFormatter(' '))
        self.assertEqual('999 999', formatter.format(999_999))


if __name__ == '__main__':
    unittest.main()
