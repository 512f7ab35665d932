# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import List

from . import AppArgumentParser
from .console import Console
from .rspfile import expand_args
from .runner import RunnerFactory
from .settings import SettingsManager


# noinspection PyMethodMayBeStatic
class App:
    def run(self, args: List[str] = None):
        try:
            self._parse_args(args)  # help processing is handled by argparse
            (RunnerFactory.create()).run()
        except Exception as e:
            Console.on_exception(e)
            self._exit(1)
        self._exit(0)

    def _parse_args(self, args: List[str] | None):
        SettingsManager.init()
        args = expand_args(sys.argv[1:] if args is None else args)
        AppArgumentParser().parse_intermixed_args(args, namespace=SettingsManager.app_settings)
        self._print_args(args)
        Console.debug_settings()

    def _print_args(self, args: List[str]):
        if not SettingsManager.app_settings.verbose or not args:
            return
        Console.print(f'Command-line arguments ({len(args)}):')
        for arg in args:
            Console.print(f'- {arg}')

    def _exit(self, code: int):
        sys.exit(code)
