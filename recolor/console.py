# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
import traceback
from abc import ABCMeta, abstractmethod
from typing import List, IO

import pytermor as pt

from .common import ArgumentError
from .settings import SettingsManager, Settings


# noinspection PyMethodMayBeStatic
class AbstractConsoleBuffer(metaclass=ABCMeta):
    @abstractmethod
    def flush(self): raise NotImplementedError


class ConsoleDebugBuffer(AbstractConsoleBuffer):
    def __init__(self, key_prefix: str = None, prefix_color: pt.IColor = pt.cv.GRAY):
        self._buf = ''
        self._key_prefix = key_prefix
        self._prefix_fmt = pt.Style(fg=prefix_color, bg=pt.cv.BLACK)

        Console.register_buffer(self)

    def write(self, level: int, s: str, line_num: int = None, end='\n', flush=True):
        if SettingsManager.app_settings.debug < level:
            return

        prefix = ''
        if isinstance(line_num, int):
            prefix = Console.format_prefix(f'#{line_num}', self._prefix_fmt)
        elif self._key_prefix is not None:
            prefix = Console.format_prefix(self._key_prefix, self._prefix_fmt)

        self._buf += f'{prefix}{s}{end}'
        if flush:
            self.flush()

    def flush(self):
        if not self._buf:
            return

        Console.debug(self._buf, end='')
        self._buf = ''


class Console:
    FMT_WARNING = pt.Style(fg=pt.cv.HI_YELLOW)
    FMT_ERROR_TRACE = pt.Style(fg=pt.cv.RED)
    FMT_ERROR = pt.Style(fg=pt.cv.HI_RED)
    FMT_BOLD = pt.Style(bold=True)
    FMT_SEPARATOR = pt.Style(fg=pt.cv.CYAN)
    MAIN_PREFIX_LEN = 8

    buffers: List[AbstractConsoleBuffer] = list()
    io: IO = sys.stderr
    _renderer: pt.SgrRenderer | None = None

    @staticmethod
    def register_buffer(buffer: AbstractConsoleBuffer):
        Console.buffers.append(buffer)

    @staticmethod
    def flush_buffers():
        for buffer in Console.buffers:
            buffer.flush()

    @staticmethod
    def on_exception(e: Exception):
        Console.flush_buffers()

        if isinstance(e, ArgumentError):
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.print(e.USAGE_MSG)

        elif SettingsManager.app_settings.debug > 0:
            tb_lines = [line.rstrip('\n')
                        for line
                        in traceback.format_exception(e.__class__, e, e.__traceback__)]
            error = tb_lines.pop(-1)
            Console.print(Console.format('\n'.join(tb_lines), Console.FMT_ERROR_TRACE))
            Console.error(error)

        else:
            Console.error(f'{e.__class__.__name__}: {e!s}')
            Console.print("Run the app with '" + Console.format('--debug', Console.FMT_BOLD) +
                          "' argument to see the details")

    @staticmethod
    def debug(s: str = '', end='\n'):
        Console.print(s, end=end)

    @staticmethod
    def info(s: str = '', end='\n'):
        Console.print(s, end=end, file=sys.stdout)

    @staticmethod
    def warn(s: str = '', end='\n'):
        Console.print(Console.format(f'WARNING: {s}', Console.FMT_WARNING), end=end)

    @staticmethod
    def error(s: str = '', end='\n'):
        Console.print(Console.format(Console.format('ERROR: ', Console.FMT_BOLD) + s, Console.FMT_ERROR), end=end)

    @staticmethod
    def format(s: str, style: pt.Style) -> str:
        if Console._renderer is None:
            output_mode = Console.resolve_output_mode(pt.OutputMode.AUTO, Console.io)
            Console._renderer = pt.SgrRenderer(output_mode, Console.io)
        return Console._renderer.render(s, style)

    @staticmethod
    def resolve_output_mode(output_mode: pt.OutputMode, io: IO) -> pt.OutputMode:
        # auto-detection is left to pytermor for terminals only
        if output_mode is pt.OutputMode.AUTO and not io.isatty():
            return pt.OutputMode.NO_ANSI
        return output_mode

    @staticmethod
    def get_separator() -> str:
        return Console.format('│', Console.FMT_SEPARATOR)

    @staticmethod
    def format_prefix(label: str, style: pt.Style) -> str:
        return Console.format(f'{label!s:>{Console.MAIN_PREFIX_LEN}.{Console.MAIN_PREFIX_LEN}s}', style) + \
               Console.get_separator()

    @staticmethod
    def debug_settings():
        app_settings = SettingsManager.app_settings
        if not app_settings.debug_settings:
            return

        default_settings = Settings()
        debug_buffer = ConsoleDebugBuffer('settings')
        attrs = sorted(attr for attr in vars(app_settings) if not attr.startswith('_'))
        max_attr_len = max([len(attr) for attr in attrs])

        for attr in attrs:
            app_value = getattr(app_settings, attr)
            default_value = getattr(default_settings, attr, None)
            value_str = f'{app_value!s}'
            if app_value != default_value:
                value_str = Console.format(value_str, Console.FMT_BOLD) + f' [{default_value!s}]'
            debug_buffer.write(3, attr.rjust(max_attr_len) + Console.get_separator() + value_str)

    @staticmethod
    def print(s: str, end='\n', **kwargs):
        kwargs.setdefault('file', Console.io)
        print(s, end=end, **kwargs)
