# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .common import ArgumentError, ColorError, RuleError, ResponseFileError

from .arghelp import AppArgumentParser
from .app import App
