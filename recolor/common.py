# -----------------------------------------------------------------------------
# es7s/recolor [Regular expression driven text colorizer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------

class ArgumentError(Exception):
    USAGE_MSG = "Run the app with '--help' argument to see the usage"


class ColorError(ArgumentError):
    pass


class RuleError(ArgumentError):
    pass


class ResponseFileError(ArgumentError):
    pass
