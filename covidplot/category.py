import enum


class Category(enum.Enum):
    """The metrics published in the JHU global time series."""
    CONFIRMED = 'confirmed'
    DEATHS = 'deaths'

    @property
    def slug(self):
        """Name used in the source file names and image routes."""
        return self.value

    @property
    def title(self):
        return self.value.capitalize()

    @property
    def counted(self):
        """What the threshold counts, as in "the first 100 confirmed cases"."""
        return {Category.CONFIRMED: "confirmed cases", Category.DEATHS: "deaths"}[self]

    @classmethod
    def parse(cls, name):
        try: return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown category: {name!r}") from None
