import http.client
import logging
import urllib.error
import urllib.request

from covidplot.errors import FetchError

log = logging.getLogger(__name__)

JHU_URL_FORMAT = (
    'https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master'
    '/csse_covid_19_data/csse_covid_19_time_series/time_series_covid19_{slug}_global.csv')


def source_url(category, url_format=JHU_URL_FORMAT):
    return url_format.format(slug=category.slug)


def fetch_csv(category, url_format=JHU_URL_FORMAT):
    """Downloads the time series for `category` and returns it as text.

    One attempt, no caching: every call goes to the network.
    """
    url = source_url(category, url_format)
    log.info("Downloading %s", url)
    try:
        with urllib.request.urlopen(url) as response:
            return response.read().decode('utf-8-sig')
            # Note: utf-8-sig gets rid of unicode byte order mark characters.
    except urllib.error.HTTPError as e:
        raise FetchError(f"Couldn't fetch {url}: failed with code {e.code}: {e.reason}") from e
    except (urllib.error.URLError, OSError, http.client.HTTPException, ValueError) as e:
        # ValueError covers undecodable bodies and malformed URLs.
        raise FetchError(f"Couldn't fetch {url}: {e}") from e
