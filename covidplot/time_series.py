import datetime
import numpy as np


class TimeSeries:
    """Represents a time series of daily counts as a float array and the
    calendar date of its first element."""
    def __init__(self, start_date, array):
        self._start_date = start_date
        self._array = np.asarray(array, dtype=np.float64)

    @classmethod
    def zeros(cls, start_date, n):
        return cls(start_date, np.zeros(n, dtype=np.float64))

    def array(self):
        return self._array

    def start_date(self):
        return self._start_date

    def date(self, n):
        return self._start_date + datetime.timedelta(n)

    def first_index_at_least(self, threshold):
        """Index of the first value >= threshold, or None if it never gets there."""
        hits = np.flatnonzero(self._array >= threshold)
        if len(hits) == 0: return None
        return int(hits[0])

    def aligned_at(self, idx):
        """The series from `idx` on, starting on the date of `idx`."""
        return TimeSeries(self.date(idx), self._array[idx:].copy())

    def __len__(self):
        return len(self._array)

    def __getitem__(self, idx):
        return self._array[idx]

    def __setitem__(self, idx, val):
        self._array[idx] = val

    def __iter__(self):
        return iter(self._array)

    def __iadd__(self, other):
        assert len(self._array) == len(other), "Can't add series of different lengths."
        self._array += np.asarray(other, dtype=np.float64)
        return self
