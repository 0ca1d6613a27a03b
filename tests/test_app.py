import io
import logging
import unittest

from humanfmt.app import App
from humanfmt.common import logger
from humanfmt.settings import Settings


class AppTestCase(unittest.TestCase):
    def setUp(self):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        self._logger_handlers = list(logger.handlers)
        self._logger_level = logger.level

    def tearDown(self):
        logger.handlers = self._logger_handlers
        logger.setLevel(self._logger_level)

    def _run(self, *argv: str) -> int:
        return App(self.stdout, self.stderr).run(['--no-color', *argv])

    def test_group(self):
        self.assertEqual(0, self._run('group', '1234567.89', '999'))
        self.assertEqual('1,234,567.89\n999\n', self.stdout.getvalue())

    def test_group_options(self):
        self._run('group', '--separator', ' ', '--minimum', '10000', '9999', '10000')
        self.assertEqual('9999\n10 000\n', self.stdout.getvalue())

    def test_abbrev(self):
        self._run('abbrev', '999', '1500000', '1e21')
        self.assertEqual('999\n1.5M\n1Sx\n', self.stdout.getvalue())

    def test_abbrev_threshold(self):
        self._run('abbrev', '--threshold', '10000', '1500', '15000')
        self.assertEqual('1,500\n15K\n', self.stdout.getvalue())

    def test_parse(self):
        self._run('parse', '1.5M', '100k', '1,234')
        self.assertEqual('1500000\n100000\n1234\n', self.stdout.getvalue())

    def test_seconds(self):
        self._run('seconds', '1d 2h 3m 2s', '30')
        self.assertEqual('93782\n30\n', self.stdout.getvalue())

    def test_remaining(self):
        self._run('remaining', '3910', '2m 30s')
        self.assertEqual('1h 5m 10s\n2m 30s\n', self.stdout.getvalue())

    def test_remaining_long(self):
        self._run('remaining', '--long', '3910')
        self.assertEqual('01:05:10\n', self.stdout.getvalue())

    def test_errors_do_not_stop_processing(self):
        exit_code = self._run('parse', '1l', '1K')
        self.assertEqual(1, exit_code)
        self.assertEqual('1000\n', self.stdout.getvalue())
        self.assertIn("unknown suffix 'l'", self.stderr.getvalue())

    def test_abbrev_not_a_number(self):
        self.assertEqual(1, self._run('abbrev', 'abc'))
        self.assertIn('not a number', self.stderr.getvalue())

    def test_invalid_unit(self):
        self.assertEqual(1, self._run('seconds', '10x'))
        self.assertIn("Invalid time unit 'x'", self.stderr.getvalue())

    def test_debug_logging(self):
        self._run('--debug', 'remaining', '-5')
        self.assertEqual(logging.DEBUG, logger.level)
        self.assertIn('Negative duration', self.stderr.getvalue())

    def test_unknown_command(self):
        with self.assertRaises(SystemExit):
            self._run('unknown', '1')


class SettingsTestCase(unittest.TestCase):
    def test_defaults(self):
        settings = Settings()
        self.assertEqual(',', settings.separator)
        self.assertEqual('.', settings.decimal)
        self.assertEqual(1000, settings.threshold)
        self.assertIsNone(settings.minimum)
        self.assertTrue(settings.color)

    def test_overrides(self):
        settings = Settings(no_color=True, threshold=10)
        self.assertFalse(settings.color)
        self.assertEqual(10, settings.threshold)


if __name__ == '__main__':
    unittest.main()
