# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import IO, List

import pytermor as pt

from . import AbstractRunner
from ..console import Console, ConsoleDebugBuffer
from ..markup import Color, Markup, MarkerRegistry, reflow
from ..painter import Painter
from ..reader import Reader
from ..settings import SettingsManager


# noinspection PyMethodMayBeStatic
class PaintRunner(AbstractRunner):
    def __init__(self, io: IO = None):
        self._io = io

    def run(self):
        app_settings = SettingsManager.app_settings
        ambient = self._get_ambient_color(app_settings.default_color)

        self._debug_buffer = ConsoleDebugBuffer('paint', pt.cv.GREEN)
        self._registry = MarkerRegistry(app_settings.rules, ambient)
        self._painter = Painter(ambient, app_settings.output_mode, self._io)
        self._reader = Reader(app_settings.filename, self._process_line)

        with self._painter.ambient():
            self._reader.read()
        self._debug_buffer.write(1, f'Lines processed: {self._reader.line_num}')

    def _get_ambient_color(self, spec: str|None) -> Color:
        if not spec:
            return Color()
        return Color.parse(spec)

    def _process_line(self, line: str, line_num: int):
        for terminator in ('\n', '\r'):
            if line.endswith(terminator):
                line = line[:-1]

        markups = self._registry.mark(line)
        resolved = reflow(markups)
        self._debug_buffer.write(1, f'{len(markups)} markup(s) -> {len(resolved)} span(s)', line_num=line_num)
        if SettingsManager.app_settings.debug_spans:
            self._debug_buffer.write(2, self._format_spans(line, resolved), line_num=line_num)

        self._painter.paint(line, resolved)

    def _format_spans(self, line: str, resolved: List[Markup]) -> str:
        return ' '.join(
            f'{m.run.start}:{m.run.end}=' + Console.format(repr(line[m.run.start:m.run.end]), Console.FMT_BOLD)
            + f'(p={m.priority})'
            for m in resolved
        )
