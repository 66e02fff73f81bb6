"""Places calendar events, such as lockdowns, on the aligned day axis."""
import datetime

from covidplot.date import days_between


def event_position(reference_start, cutoff, event_date):
    """Days from a country's day zero to `event_date`.

    Day zero is `cutoff` days after `reference_start`, the first date of the
    source.  Events before day zero get a negative position.
    """
    day_zero = reference_start + datetime.timedelta(days=cutoff)
    return days_between(day_zero, event_date)


def event_positions(dataset, event_dates):
    """Maps each country with both a series and an event to the event's x position."""
    return {country: event_position(dataset.reference_start_date, dataset.cutoff[country], d)
            for country, d in event_dates.items()
            if country in dataset.series}
