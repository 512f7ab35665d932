# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
"""
Response files: ``@path`` arguments are replaced with the arguments read from
the file. Lines starting with ``#`` and blank lines are skipped, the rest is
joined with spaces and split the way Microsoft C runtime splits a command
line. Backslashes are kept as is unless they precede a double quote, which
makes response files convenient for regular expressions.
"""
from __future__ import annotations

from os.path import exists, expanduser, join, sep, altsep
from typing import Iterable, Iterator, List

from .common import ResponseFileError

PREFIX = '@'
COMMENT_PREFIX = '#'
USER_DIR_NAME = '.recolor'
USER_FILE_EXT = '.rsp'


def expand_args(args: Iterable[str]) -> List[str]:
    result = []
    for arg in args:
        if not arg.startswith(PREFIX):
            result.append(arg)
            continue
        if len(arg) > len(PREFIX):
            result.extend(read_response_file(arg[len(PREFIX):]))
    return result


def read_response_file(path: str) -> List[str]:
    for candidate in _get_search_paths(path):
        if exists(candidate):
            with open(candidate, 'rt') as f:
                lines = [line.rstrip('\r\n') for line in f]
            break
    else:
        raise ResponseFileError(f'Unable to find the response file "{path}"')

    return split_command_line(' '.join(
        line for line in lines
        if line.strip() and not line.startswith(COMMENT_PREFIX)
    ))


def _get_search_paths(path: str) -> Iterator[str]:
    separators = tuple(s for s in (sep, altsep) if s)
    if path.startswith(tuple('~' + s for s in separators)):
        yield expanduser('~') + path[1:]
        return

    yield path
    if not path.startswith('~') or any(s in path for s in separators):
        return

    user_dir = join(expanduser('~'), USER_DIR_NAME)
    yield join(user_dir, path[1:] + USER_FILE_EXT)
    yield join(user_dir, path[1:])


def split_command_line(s: str) -> List[str]:
    """
    Split ``s`` into arguments:

        - spaces and tabs separate arguments unless quoted;
        - double quotes toggle the quoted state and are removed, two double
          quotes inside quoted text produce a literal quote;
        - 2n backslashes followed by a quote produce n backslashes, and the
          quote toggles the quoted state; 2n+1 backslashes followed by a quote
          produce n backslashes and a literal quote;
        - backslashes not followed by a quote are literal.

    >>> split_command_line(r'red=\\d+ "yellow*=a b" x\\"y')
    ['red=\\\\d+', 'yellow*=a b', 'x"y']
    """
    args = []
    i = 0
    length = len(s)

    while i < length:
        while i < length and s[i] in ' \t':
            i += 1
        if i == length:
            break

        current = []
        in_quotes = False
        while i < length:
            backslashes = 0
            while i < length and s[i] == '\\':
                i += 1
                backslashes += 1

            if backslashes:
                if i >= length or s[i] != '"':
                    current.append('\\' * backslashes)
                else:
                    current.append('\\' * (backslashes // 2))
                    if backslashes % 2:
                        current.append('"')
                        i += 1
                continue

            c = s[i]
            if c == '"':
                if in_quotes and i < length - 1 and s[i + 1] == '"':
                    current.append('"')
                    i += 1
                else:
                    in_quotes = not in_quotes
                i += 1
                continue

            if c in ' \t' and not in_quotes:
                break

            current.append(c)
            i += 1

        args.append(''.join(current))

    return args
