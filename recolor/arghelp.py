# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import re
from argparse import HelpFormatter, Action, ArgumentParser, SUPPRESS
from typing import Optional, Iterable, List

import pytermor as pt

from .console import Console
from .settings import Settings


class AppHelpFormatter(HelpFormatter):
    """
    Bold upper-case section titles without trailing colons, option
    invocations in ``-f, --file <file>`` form and an extra examples section.
    """
    INDENT = '  '
    TITLE_COLON_REGEX = re.compile(r'^((?:\033\[[0-9;]*m)?[A-Z ]+(?:\033\[[0-9;]*m)?):$', re.MULTILINE)

    def __init__(self, prog: str):
        super().__init__(prog, max_help_position=30, indent_increment=len(self.INDENT))

    @staticmethod
    def format_title(title: str) -> str:
        return Console.format(title.upper(), Console.FMT_BOLD)

    def start_section(self, heading: Optional[str]):
        super().start_section(self.format_title(heading) if heading else heading)

    def add_usage(self, usage: Optional[str], actions: Iterable[Action], groups: Iterable, prefix: str = None):
        self.add_text(self.format_title('usage'))
        super().add_usage(usage.replace('\n', '\n' + self.INDENT), actions, groups, prefix=self.INDENT)

    def add_examples(self, examples: List[str]):
        if not examples:
            return
        self.start_section('examples')
        self._add_item(self._format_text, ['\n'.join(examples)])
        self.end_section()

    def format_help(self) -> str:
        return self.TITLE_COLON_REGEX.sub(r'\1', super().format_help())

    def _format_action_invocation(self, action: Action) -> str:
        if not action.option_strings or action.nargs == 0:
            return super()._format_action_invocation(action)

        # the argument is shown once, after the long option
        args = self._format_args(action, self._get_default_metavar_for_optional(action))
        long_options = [opt for opt in action.option_strings if opt.startswith('--')]
        return ', '.join(
            opt if long_options and opt not in long_options else f'{opt} {args}'
            for opt in action.option_strings
        )

    def _format_text(self, text: str) -> str:
        return super()._format_text(text).rstrip('\n') + '\n'

    def _fill_text(self, text: str, width: int, indent: str) -> str:
        # keep line breaks of the epilog and examples
        return ''.join(indent + line for line in text.splitlines(keepends=True))


class AppArgumentParser(ArgumentParser):
    USAGE = [
        '%(prog)s [<options>] [<rule> | @<file>]...',
        '%(prog)s --list-colors',
        '%(prog)s --version',
        '%(prog)s --help',
    ]

    def __init__(self):
        fmt_b = pt.Style(bold=True)
        fmt_u = pt.Style(underlined=True)
        self._fmt_default = pt.Style(fg=pt.cv.YELLOW)

        def b(s): return Console.format(str(s), fmt_b)
        def u(s): return Console.format(str(s), fmt_u)

        super().__init__(
            prog='recolor',
            description='Regular expression driven text colorizer',
            usage='\n'.join(self.USAGE),
            epilog='\n'.join([
                f'Each {b("<rule>")} has the form {b("COLOR[*]=REGEX")}. Lines are read from stdin (or from '
                f'{b("--file")}) and the parts matching REGEX are painted with COLOR. By default only the first '
                f'match in a line is painted, the "*" suffix paints all of them. When rules overlap, the rule '
                f'specified later wins. Rules and options can be given in any order.',
                '',
                f'COLOR is either one or two hex digits (low digit is foreground, high digit is background, '
                f'indexes as in {b("--list-colors")}) or {b("FG/BG")} names, each side can be omitted. Besides '
                f'16 console color names any name known to pytermor or a "#RRGGBB" value is accepted.',
                '',
                f'An argument in form of {b("@<file>")} is replaced with the arguments read from the file, one or '
                f'more per line; lines starting with "#" are ignored. "@~name" is also searched for in '
                f'"~/.recolor/name.rsp" and "~/.recolor/name".',
                '',
                '(c) 2022 A. Shavykin <0.delameter@gmail.com>',
            ]),
            add_help=False,
            formatter_class=AppHelpFormatter,
        )
        self._examples = [
            'Paint errors red and warnings yellow, all occurrences',
            ''.ljust(4) + f"make 2>&1 | {u('%(prog)s')} 'red*=error' 'yellow*=warning'",
            '',
            'Paint the first number of each line white on dark blue',
            ''.ljust(4) + f"{u('%(prog)s')} -f {u('app.log')} '1f=\\d+'",
            '',
            'Read the rules from ~/.recolor/log.rsp',
            ''.ljust(4) + f"tail -f {u('app.log')} | {u('%(prog)s')} @~log",
            '',
        ]
        self._add_arguments()

    def format_help(self) -> str:
        formatter = self._get_formatter()
        formatter.add_usage(self.usage, self._actions, self._mutually_exclusive_groups)
        formatter.add_text(self.description)
        for group in self._action_groups:
            if not group._group_actions:
                continue
            formatter.start_section(group.title)
            formatter.add_text(group.description)
            formatter.add_arguments(group._group_actions)
            formatter.end_section()
        formatter.add_text(self.epilog)
        formatter.add_examples(self._examples)
        return formatter.format_help()

    def _default(self, s: str) -> str:
        return Console.format(s, self._fmt_default)

    def _add_arguments(self):
        self.add_argument('rules', metavar='<rule>', nargs='*', help='coloring rule in form of COLOR[*]=REGEX; later rules take precedence')

        modes_group = self.add_argument_group('operating mode')
        modes_group_nested = modes_group.add_mutually_exclusive_group()
        modes_group_nested.add_argument('-l', '--list-colors', action='store_true', default=False, help='show console color names and exit')
        modes_group_nested.add_argument('-V', '--version', action='store_true', default=False, help='show app version and exit')
        modes_group.add_argument('-h', '--help', action='help', default=SUPPRESS, help='show this help message and exit')

        generic_group = self.add_argument_group('generic options')
        generic_group.add_argument('-f', '--file', dest='filename', metavar='<file>', default=None, help='file to read from; if empty or "-", read stdin instead')
        generic_group.add_argument('-L', '--max-lines', metavar='<num>', action='store', type=int, default=0, help='stop after reading <num> lines '+self._default('[default: no limit]'))
        generic_group.add_argument('-D', '--default-color', metavar='<color>', default=None, help='color of text not matched by any rule '+self._default('[default: terminal colors]'))
        generic_group.add_argument('-m', '--color-mode', metavar='<mode>', choices=Settings.COLOR_MODES, default='auto', help='output color mode: '+', '.join(Settings.COLOR_MODES)+' '+self._default('[default: %(default)s]'))
        generic_group.add_argument('-v', '--verbose', action='store_true', default=False, help='print the command line arguments after response files expansion')
        generic_group.add_argument('-d', '--debug', action='count', default=0, help='enable debug mode; can be used from 1 to 3 times, each level increases verbosity (-d|dd|ddd)')
