# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from . import AbstractRunner, ColorListRunner, PaintRunner, VersionRunner
from ..settings import SettingsManager


class RunnerFactory:
    @staticmethod
    def create() -> AbstractRunner:
        if SettingsManager.app_settings.list_colors:
            return ColorListRunner()
        elif SettingsManager.app_settings.version:
            return VersionRunner()
        return PaintRunner()
