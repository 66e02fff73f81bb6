import datetime

from covidplot.errors import DateFormatError

# The JHU time series headers look like 3/17/20.
HEADER_DATE_FORMAT = '%m/%d/%y'


def parse_header_date(s):
    """Parses a date column header of the time series."""
    try: return datetime.datetime.strptime(s.strip(), HEADER_DATE_FORMAT).date()
    except ValueError:
        raise DateFormatError(f"Unparsable date column: {s!r}") from None


def days_between(start, end):
    """Signed number of days from `start` to `end`, as a float."""
    return (end - start) / datetime.timedelta(days=1)
