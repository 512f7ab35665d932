# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import re
from typing import Dict, List, Optional

import pytermor as pt

from ..common import ColorError

# indexed the same way as the 16 console colors of the Windows console
CONSOLE_PALETTE: List[pt.IColor] = [
    pt.cv.BLACK,       # 0 black
    pt.cv.BLUE,        # 1 darkblue
    pt.cv.GREEN,       # 2 darkgreen
    pt.cv.CYAN,        # 3 darkcyan
    pt.cv.RED,         # 4 darkred
    pt.cv.MAGENTA,     # 5 darkmagenta
    pt.cv.YELLOW,      # 6 darkyellow
    pt.cv.WHITE,       # 7 gray
    pt.cv.GRAY,        # 8 darkgray
    pt.cv.HI_BLUE,     # 9 blue
    pt.cv.HI_GREEN,    # a green
    pt.cv.HI_CYAN,     # b cyan
    pt.cv.HI_RED,      # c red
    pt.cv.HI_MAGENTA,  # d magenta
    pt.cv.HI_YELLOW,   # e yellow
    pt.cv.HI_WHITE,    # f white
]

CONSOLE_NAMES: List[str] = [
    'black', 'darkblue', 'darkgreen', 'darkcyan',
    'darkred', 'darkmagenta', 'darkyellow', 'gray',
    'darkgray', 'blue', 'green', 'cyan',
    'red', 'magenta', 'yellow', 'white',
]

CONSOLE_NAME_MAP: Dict[str, pt.IColor] = dict(zip(CONSOLE_NAMES, CONSOLE_PALETTE))


class Color:
    """
    Foreground/background pair. Unset (*None*) channel means "leave the
    current terminal channel as it is".

    Accepted specifications, see `parse()`:

        - ``c``, ``1f``: one or two hex digits, low nibble is foreground
          console color index, high nibble is background index;
        - ``red``, ``red/black``, ``/darkblue``: color names separated with
          a slash, each side can be empty;
        - any name or ``#RRGGBB`` value known to pytermor color registries,
          e.g. ``hi-red/deep-sky-blue-7``.
    """
    HEX_REGEX = re.compile(r'[0-9a-fA-F]{1,2}')
    SEPARATOR = '/'

    def __init__(self, fg: pt.IColor = None, bg: pt.IColor = None):
        self._fg: Optional[pt.IColor] = fg
        self._bg: Optional[pt.IColor] = bg

    @classmethod
    def parse(cls, spec: str) -> Color:
        if cls.HEX_REGEX.fullmatch(spec):
            n = int(spec, 16)
            return cls(CONSOLE_PALETTE[n & 0xf], CONSOLE_PALETTE[n >> 4])

        tokens = spec.split(cls.SEPARATOR, 1)
        fg = cls._parse_name(tokens[0])
        bg = cls._parse_name(tokens[1]) if len(tokens) > 1 else None
        return cls(fg, bg)

    @staticmethod
    def _parse_name(name: str) -> pt.IColor | None:
        name = name.strip()
        if not name:
            return None
        if (color := CONSOLE_NAME_MAP.get(name.lower())) is not None:
            return color
        try:
            return pt.resolve_color(name)
        except LookupError as e:
            raise ColorError(f'Unknown color name: {name!r}') from e

    @property
    def fg(self) -> pt.IColor | None:
        return self._fg

    @property
    def bg(self) -> pt.IColor | None:
        return self._bg

    @property
    def is_unset(self) -> bool:
        return self._fg is None and self._bg is None

    @property
    def style(self) -> pt.Style:
        return pt.Style(fg=self._fg, bg=self._bg)

    def __eq__(self, other: Color):
        if not isinstance(other, Color):
            return False
        return self._fg == other._fg and self._bg == other._bg

    def __repr__(self):
        return f'{self.__class__.__name__}[fg={self._fg!r},bg={self._bg!r}]'
