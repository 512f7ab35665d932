# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .run import Run
from .color import Color, CONSOLE_NAMES, CONSOLE_PALETTE
from .markup import Markup
from .marker import AbstractMarker, BaselineMarker, Marker, MarkerRegistry
from .reflow import reflow
