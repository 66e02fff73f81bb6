import datetime
import io

import pytest

from covidplot.category import Category
from covidplot.config import Config

SAMPLE_CSV = """\
Province/State,Country/Region,Lat,Long,1/22/20,1/23/20,1/24/20,1/25/20,1/26/20,1/27/20
,France,46.2276,2.2137,0,1,5,12,40,90
Martinique,France,14.6415,-61.0242,0,0,,1,2,3
Hubei,China,30.9756,112.2707,444,444,549,761,1058,1423
,Italy,41.8719,12.5674,0,3,9,20,30,50
,Spain,40.4637,-3.7492,0,0,1,2,3,4
"""


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def sample_source():
    return io.StringIO(SAMPLE_CSV)


@pytest.fixture
def config():
    return Config(
        countries=["France", "Italy", "Spain", "Germany"],
        thresholds={Category.CONFIRMED: 10.0, Category.DEATHS: 2.0},
        lockdown_dates={
            "Italy": datetime.date(2020, 1, 25),
            "France": datetime.date(2020, 1, 27),
        },
        known_corrections={
            (Category.DEATHS, "France", 2): 30,
        })
