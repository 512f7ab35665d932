# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import IO, Iterator, List

import pytermor as pt

from .console import Console, ConsoleDebugBuffer
from .markup import Color, Markup


class Painter:
    """
    Writes resolved markups of a line to the output stream.

    Every span is rendered with its own color; a channel the span leaves
    unset is filled with the ambient color channel, if there is one, and
    otherwise stays with terminal default.
    """
    RESET_SEQ = pt.SequenceSGR(0)

    def __init__(self, ambient: Color, output_mode: pt.OutputMode = pt.OutputMode.AUTO, io: IO = None):
        self._ambient = ambient
        self._io = io or sys.stdout
        self._renderer = pt.SgrRenderer(Console.resolve_output_mode(output_mode, self._io), self._io)
        self._debug_buffer = ConsoleDebugBuffer('painter', pt.cv.YELLOW)

    @contextmanager
    def ambient(self) -> Iterator[Painter]:
        self._debug_buffer.write(2, f'Ambient color: {self._ambient!r}')
        try:
            yield self
        finally:
            self.restore()

    def paint(self, line: str, markups: List[Markup], end: str = '\n'):
        for markup in markups:
            text = line[markup.run.start:markup.run.end]
            self._io.write(self._renderer.render(text, self._make_style(markup.color)))
        self._io.write(end)

    def restore(self):
        if self._renderer.is_format_allowed:
            self._io.write(self.RESET_SEQ.assemble())
        self._io.flush()
        self._debug_buffer.write(2, 'Ambient color restored')

    def _make_style(self, color: Color) -> pt.Style:
        if self._ambient.is_unset:
            return color.style
        return pt.Style(self._ambient.style, fg=color.fg, bg=color.bg)
