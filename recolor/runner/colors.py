# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from typing import IO

from . import AbstractRunner
from ..markup import Color, Markup, CONSOLE_NAMES, CONSOLE_PALETTE
from ..painter import Painter
from ..settings import SettingsManager


class ColorListRunner(AbstractRunner):
    def __init__(self, io: IO = None):
        self._io = io

    def run(self):
        painter = Painter(Color(), SettingsManager.app_settings.output_mode, self._io)
        with painter.ambient():
            for idx, (name, color) in enumerate(zip(CONSOLE_NAMES, CONSOLE_PALETTE)):
                line = f'{idx:x}  {name}'
                painter.paint(line, [Markup.create(0, len(line), Color(fg=color), 0)])
