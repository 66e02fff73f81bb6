import datetime

from covidplot.annotate import event_position, event_positions
from covidplot.category import Category
from covidplot.dataset import build_dataset

JAN_22 = datetime.date(2020, 1, 22)


def test_event_on_day_zero():
    assert event_position(JAN_22, 36, datetime.date(2020, 2, 27)) == 0


def test_event_before_day_zero_is_negative():
    assert event_position(JAN_22, 36, datetime.date(2020, 2, 26)) == -1


def test_event_after_day_zero():
    assert event_position(JAN_22, 36, datetime.date(2020, 3, 17)) == 19.0


def test_positions_only_for_countries_with_events(sample_source, config):
    ds = build_dataset(sample_source, Category.CONFIRMED, 10, config)
    positions = event_positions(ds, config.lockdown_dates)
    # Both reached 10 cases on 1/25.
    assert positions == {"Italy": 0.0, "France": 2.0}


def test_no_position_for_countries_without_data(sample_source, config):
    ds = build_dataset(sample_source, Category.CONFIRMED, 10, config)
    positions = event_positions(ds, {"Germany": datetime.date(2020, 1, 23)})
    assert positions == {}


def test_position_matches_day_zero(sample_source, config):
    ds = build_dataset(sample_source, Category.CONFIRMED, 10, config)
    position = event_positions(ds, {"Italy": datetime.date(2020, 1, 22)})["Italy"]
    assert ds.day_zero("Italy") + datetime.timedelta(days=position) == datetime.date(2020, 1, 22)
