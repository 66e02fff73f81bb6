class Covid19Error(Exception):
    """Base class for everything that can abort a chart request."""


class FetchError(Covid19Error):
    """The remote time series could not be retrieved."""


class ParseError(Covid19Error):
    """The time series had a malformed header, row, or cell."""


class DateFormatError(Covid19Error):
    """A header date column wasn't in M/D/YY form."""


class RenderError(Covid19Error):
    """The plotting library failed to draw or encode the chart."""


class ChartError(Covid19Error):
    """Wraps the failure of one stage of chart generation.

    `stage` is one of "fetch", "parse" or "render"; the underlying error is
    available both as `cause` and as `__cause__`.
    """
    _WHAT = {"fetch": "fetch data", "parse": "parse data", "render": "render chart"}

    def __init__(self, stage, cause):
        super().__init__(f"could not {self._WHAT[stage]}: {cause}")
        self.stage = stage
        self.cause = cause
