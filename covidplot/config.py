import datetime

from covidplot.category import Category


class Config:
    """The static tables a chart is built from.

    - countries: JHU "Country/Region" names to plot, in legend order.
    - thresholds: Category -> count that defines day zero.
    - lockdown_dates: country -> date the lockdown started.
    - known_corrections: (Category, country, raw index) -> corrected count.
      Indices count days from the first data column of the source.
    """
    def __init__(self, countries, thresholds, lockdown_dates=None, known_corrections=None):
        self.countries = list(countries)
        self.thresholds = dict(thresholds)
        self.lockdown_dates = dict(lockdown_dates or {})
        self.known_corrections = dict(known_corrections or {})
        for c in Category:
            if c not in self.thresholds:
                raise ValueError(f"No threshold configured for {c.slug}")

    def threshold(self, category):
        return self.thresholds[category]


DEFAULT_CONFIG = Config(
    countries=[
        "France",
        "Italy",
        "Spain",
        "Germany",
        "US",
        "United Kingdom",
    ],
    thresholds={
        Category.CONFIRMED: 100.0,
        Category.DEATHS: 10.0,
    },
    lockdown_dates={
        "Italy": datetime.date(2020, 2, 27),  # lockdown of northern regions
        "France": datetime.date(2020, 3, 17),
    },
    known_corrections={
        (Category.DEATHS, "France", 47): 30,   # 2020-03-09
        (Category.DEATHS, "France", 55): 175,  # 2020-03-17
        (Category.DEATHS, "France", 56): 244,  # 2020-03-18
        (Category.DEATHS, "France", 57): 372,  # 2020-03-19
    })
