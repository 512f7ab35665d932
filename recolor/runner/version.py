# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import pytermor

from . import AbstractRunner
from ..console import Console
from ..version import __version__


class VersionRunner(AbstractRunner):
    def run(self):
        Console.info("es7s/recolor".ljust(16) + __version__)
        Console.info("pytermor".ljust(16) + pytermor.__version__)
