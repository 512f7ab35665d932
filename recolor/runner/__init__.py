# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from ._abstract import AbstractRunner

from .paint import PaintRunner
from .colors import ColorListRunner
from .version import VersionRunner

from .factory import RunnerFactory
