"""Turns the JHU global time series into per-country series aligned on the
day each country first reached a threshold.

The source has one row per province/state, with the columns

    Province/State, Country/Region, Lat, Long, 1/22/20, 1/23/20, ...

and cumulative counts under each date (an empty cell counts as zero).
"""
import logging
import math

from covidplot.csv import csv_rows
from covidplot.date import parse_header_date
from covidplot.errors import ParseError
from covidplot.time_series import TimeSeries

log = logging.getLogger(__name__)

# Columns before the first date: province, country, latitude, longitude.
FIRST_DATE_COLUMN = 4
COUNTRY_COLUMN = 1


class Dataset:
    """The aligned series of one category.

    `series[country]` starts on the day the country reached the threshold and
    `cutoff[country]` is how many days into the source that happened, so that
    raw[cutoff + i] == series[i].
    """
    def __init__(self, reference_start_date, latest_date):
        self.reference_start_date = reference_start_date
        self.latest_date = latest_date
        self.series = {}
        self.cutoff = {}

    def day_zero(self, country):
        """Calendar date of index 0 of the country's aligned series."""
        return self.series[country].start_date()


def parse_cell(s, line_num, column):
    if s == '': return 0.0
    try: v = float(s)
    except ValueError:
        raise ParseError(f"line {line_num}, column {column}: could not parse {s!r}") from None
    if not math.isfinite(v):
        raise ParseError(f"line {line_num}, column {column}: not a count: {s!r}")
    return v


def aggregate(source, countries):
    """Sums the province rows of each tracked country into a national series.

    `source` is a text stream.  Returns the header row and a dict
    mapping each tracked country that has at least one row to its series,
    whose index 0 is the first date column.
    """
    rows = csv_rows(source)
    headers = rows.headers()
    if len(headers) <= FIRST_DATE_COLUMN:
        raise ParseError(f"Header has no date columns: {headers}")
    start_date = parse_header_date(headers[FIRST_DATE_COLUMN])
    n = len(headers) - FIRST_DATE_COLUMN
    tracked = set(countries)

    totals = {}
    for line_num, row in rows:
        if len(row) != len(headers):
            raise ParseError(f"line {line_num}: expected {len(headers)} columns, got {len(row)}")
        country = row[COUNTRY_COLUMN]
        if country not in tracked: continue
        values = [parse_cell(s, line_num, FIRST_DATE_COLUMN + i)
                for i, s in enumerate(row[FIRST_DATE_COLUMN:])]
        if country not in totals:
            totals[country] = TimeSeries.zeros(start_date, n)
        totals[country] += values
    return headers, totals


def align(aggregated, threshold):
    """Cuts off the days before the series first reached `threshold`.

    Returns the aligned series and the number of days cut.  A series that
    never reaches the threshold is returned whole with a cutoff of 0.
    """
    cutoff = aggregated.first_index_at_least(threshold)
    if cutoff is None: cutoff = 0
    return aggregated.aligned_at(cutoff), cutoff


def apply_corrections(category, aggregated, corrections):
    """Overwrites known bad data points in the un-aligned series.

    `corrections` maps (category, country, index) to the value to use.
    """
    for (c, country, idx), value in corrections.items():
        if c is not category or country not in aggregated: continue
        series = aggregated[country]
        if not 0 <= idx < len(series):
            raise ParseError(
                f"Correction for {country} at day {idx} is outside the {len(series)} day series")
        series[idx] = value


def build_dataset(source, category, threshold, config):
    """Parses, corrects and aligns one category of the time series."""
    headers, aggregated = aggregate(source, config.countries)

    dataset = Dataset(parse_header_date(headers[FIRST_DATE_COLUMN]),
                      parse_header_date(headers[-1]))
    apply_corrections(category, aggregated, config.known_corrections)

    for country in config.countries:
        if country not in aggregated:
            log.warning("%s: no rows for %s", category.slug, country)
            continue
        dataset.series[country], dataset.cutoff[country] = align(aggregated[country], threshold)
    return dataset
