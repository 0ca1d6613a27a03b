from __future__ import annotations

from argparse import HelpFormatter, ArgumentParser, SUPPRESS
from typing import Optional, List

import pytermor as pt


class CustomHelpFormatter(HelpFormatter):
    INDENT_INCREMENT = 2
    INDENT = ' ' * INDENT_INCREMENT

    @staticmethod
    def format_header(title: str) -> str:
        return pt.render(title.upper(), pt.Style(bold=True))

    def __init__(self, prog):
        super().__init__(prog, max_help_position=30, indent_increment=self.INDENT_INCREMENT)

    def start_section(self, heading: Optional[str]):
        super().start_section(self.format_header(heading) if heading else heading)

    def add_examples(self, examples: List[str]):
        self.start_section('example' + ('s' if len(examples) > 1 else ''))
        self._add_item(self._format_text, ['\n'.join(examples)])
        self.end_section()

    def _format_text(self, text: str) -> str:
        return super()._format_text(text).rstrip('\n') + '\n'

    def _fill_text(self, text, width, indent):
        return ''.join(indent + line for line in text.splitlines(keepends=True))


class CustomArgumentParser(ArgumentParser):
    def __init__(self, examples: List[str] = None, **kwargs):
        self.examples = examples
        super(CustomArgumentParser, self).__init__(**kwargs)

    def format_help(self) -> str:
        result = super().format_help()
        if self.examples:
            formatter = self._get_formatter()
            if isinstance(formatter, CustomHelpFormatter):
                formatter.add_examples(self.examples)
                result += formatter.format_help()
        return result


class AppArgumentParser(CustomArgumentParser):
    COMMANDS = {
        'group': 'place grouping separators between every three digits',
        'abbrev': 'abbreviate large numbers with magnitude suffixes (1.5M)',
        'parse': 'convert abbreviated numbers back (1.5M -> 1500000)',
        'seconds': 'convert duration strings to seconds (1h 5m -> 3900)',
        'remaining': 'convert seconds to duration strings (3900 -> 1h 5m)',
    }

    def __init__(self):
        super().__init__(
            description='Human-readable numbers and durations converter',
            usage='%(prog)s [<options>] <command> <value>...',
            epilog='Each value is converted separately, one result per line.',
            examples=[
                '%(prog)s group 1234567.89',
                '%(prog)s abbrev --threshold 10000 1500 1500000',
                '%(prog)s parse 1.5M 100k',
                '%(prog)s seconds "1d 2h 3m 2s"',
                '%(prog)s remaining --long 3910',
            ],
            add_help=False,
            formatter_class=lambda prog: CustomHelpFormatter(prog),
            prog='humanfmt',
        )

        self.add_argument('command', metavar='<command>', choices=self.COMMANDS.keys(),
                          help='one of: ' + ', '.join(self.COMMANDS.keys()))
        self.add_argument('values', metavar='<value>', nargs='+', help='value(s) to convert')

        grouping_group = self.add_argument_group('grouping options')
        grouping_group.add_argument('--minimum', metavar='<num>', type=float, default=None,
                                    help='do not group values less than <num>')
        grouping_group.add_argument('--separator', metavar='<str>', type=str, default=',',
                                    help='group separator [default: ","]')
        grouping_group.add_argument('--decimal', metavar='<str>', type=str, default='.',
                                    help='decimal separator [default: "."]')

        abbrev_group = self.add_argument_group('abbreviation options')
        abbrev_group.add_argument('--threshold', metavar='<num>', type=float, default=1000,
                                  help='minimum value to abbreviate [default: 1000]')

        duration_group = self.add_argument_group('duration options')
        duration_group.add_argument('-l', '--long', action='store_true', default=False,
                                    help='output remaining time as HH:MM:SS')

        misc_group = self.add_argument_group('misc')
        misc_group.add_argument('--no-color', action='store_true', default=False,
                                help='disable output coloring')
        misc_group.add_argument('-d', '--debug', action='store_true', default=False,
                                help='print library log messages to stderr')
        misc_group.add_argument('-h', '--help', action='help', default=SUPPRESS,
                                help='show this help message and exit')
