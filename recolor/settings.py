# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from argparse import Namespace
from typing import Any, List

from pytermor import OutputMode


class Settings(Namespace):
    COLOR_MODES = ['auto', 'no_ansi', 'xterm_16', 'xterm_256', 'true_color']

    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)

        self.color_mode: str = 'auto'
        self.debug: int = 0
        self.default_color: str|None = None  # terminal defaults
        self.filename: str|None = None
        self.list_colors: bool = False
        self.max_lines: int = 0  # no limit
        self.rules: List[str] = []
        self.verbose: bool = False
        self.version: bool = False

    @property
    def output_mode(self) -> OutputMode:
        try:
            return OutputMode[self.color_mode.upper()]
        except KeyError:
            raise ValueError(f'Invalid color mode: {self.color_mode!r}')

    @property
    def debug_settings(self) -> bool:
        return self.debug >= 3

    @property
    def debug_spans(self) -> bool:
        return self.debug >= 2


class SettingsManager:
    app_settings: Settings

    @staticmethod
    def init():
        SettingsManager.app_settings = Settings()
