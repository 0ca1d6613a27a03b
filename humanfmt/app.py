from __future__ import annotations

import logging
import sys
from typing import List, TextIO

import pytermor as pt

from .arghelp import AppArgumentParser
from .common import NT, logger
from .duration import to_seconds, to_remaining_time, to_long_remaining_time
from .error import FormattingError, InvalidFormat
from .number import comma_format, abbreviate
from .settings import Settings
from .suffix import parse_abbreviated


class App:
    STYLE_RESULT = pt.Style(fg=pt.cv.GREEN)
    STYLE_ERROR = pt.Style(fg=pt.cv.RED)

    def __init__(self, stdout: TextIO = None, stderr: TextIO = None):
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr
        self._settings = Settings()

    def run(self, argv: List[str] = None) -> int:
        self._parse_args(argv)
        if self._settings.debug:
            self._setup_logging()

        exit_code = 0
        for value in self._settings.values:
            try:
                result = self._convert(value)
            except FormattingError as e:
                self._print_error(e)
                exit_code = 1
                continue
            self._print(result)
        return exit_code

    def _parse_args(self, argv: List[str] = None):
        AppArgumentParser().parse_args(argv, namespace=self._settings)

    def _setup_logging(self):
        handler = logging.StreamHandler(self._stderr)
        handler.setFormatter(logging.Formatter('[%(levelname)5.5s][%(name)s.%(module)s] %(message)s'))
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)

    def _convert(self, value: str) -> str:
        settings = self._settings
        command = settings.command

        if command == 'group':
            return comma_format(value, settings.minimum, settings.separator, settings.decimal)
        if command == 'abbrev':
            return abbreviate(self._read_number(value), settings.threshold)
        if command == 'parse':
            return str(parse_abbreviated(value))
        if command == 'seconds':
            return str(to_seconds(value))
        if command == 'remaining':
            seconds = to_seconds(value)
            if settings.long:
                return to_long_remaining_time(seconds)
            return to_remaining_time(seconds)
        raise ValueError(f'Unknown command: {command}')

    @staticmethod
    def _read_number(value: str) -> NT:
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            raise InvalidFormat(value, 'not a number') from None

    def _print(self, result: str):
        if self._settings.color:
            result = pt.render(result, self.STYLE_RESULT)
        print(result, file=self._stdout)

    def _print_error(self, e: Exception):
        msg = f'Error: {e}'
        if self._settings.color:
            msg = pt.render(msg, self.STYLE_ERROR)
        print(msg, file=self._stderr)


def main():
    sys.exit(App().run())
