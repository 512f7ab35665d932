# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import BinaryIO, Callable

import pytermor as pt

from .console import Console, ConsoleDebugBuffer
from .settings import SettingsManager


class Reader:
    """
    Reads the input line by line as bytes and hands decoded lines to the
    callback. Malformed byte sequences are replaced with U+FFFD, so a broken
    line never stops the stream.
    """
    ENCODING = 'utf-8'

    def __init__(self, filename: str|None, read_callback: Callable[[str, int], None]):
        self._filename = filename
        self._io: BinaryIO|None = None
        self._line_num = 0
        self._read_callback = read_callback
        self._debug_buffer = ConsoleDebugBuffer('reader', pt.cv.MAGENTA)

    @property
    def reading_stdin(self) -> bool:
        return not self._filename or self._filename == '-'

    @property
    def line_num(self) -> int:
        return self._line_num

    def read(self):
        self._open()
        max_lines: int = SettingsManager.app_settings.max_lines
        try:
            for raw_line in self._io:
                self._line_num += 1
                self._read_callback(raw_line.decode(self.ENCODING, errors='replace'), self._line_num)

                if max_lines and self._line_num >= max_lines:
                    self._debug_buffer.write(1, 'Line limit exceeded: ' +
                                             Console.format(str(max_lines), Console.FMT_BOLD))
                    break
            else:
                self._debug_buffer.write(1, 'Encountered EOF')

        except KeyboardInterrupt:
            pass
        finally:
            self.close()

    def _open(self):
        if self.reading_stdin:
            self._io = sys.stdin.buffer
            self._debug_buffer.write(1, 'Reading from stdin')
        else:
            self._io = open(self._filename, 'rb')
            self._debug_buffer.write(1, 'Opened file: ' + Console.format(self._filename, Console.FMT_BOLD))

    def close(self):
        if self.reading_stdin:
            return
        if self._io and not self._io.closed:
            self._io.close()
