import csv

from covidplot.errors import ParseError


class csv_rows:
    """Reads a delimited time series: the header up front, then each data
    row as a (line number, list of cells) pair."""
    def __init__(self, source):
        self._csv_reader = csv.reader(source)
        try: self._headers = next(self._csv_reader)
        except StopIteration: raise ParseError("Missing CSV header") from None
        except csv.Error as e: raise ParseError(f"Could not read CSV header: {e}") from e

    def headers(self):
        return self._headers

    def __iter__(self):
        try:
            for row in self._csv_reader:
                if not row: continue  # blank line
                yield self._csv_reader.line_num, row
        except csv.Error as e:
            raise ParseError(f"Could not read CSV data: {e}") from e
