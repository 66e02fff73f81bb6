import io
import logging
import math

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.ticker import MaxNLocator

from covidplot.annotate import event_positions
from covidplot.config import DEFAULT_CONFIG
from covidplot.dataset import build_dataset
from covidplot.errors import ChartError, Covid19Error, FetchError, RenderError
from covidplot.fetch import fetch_csv

log = logging.getLogger(__name__)

SOFT_COLORS = ['#f15a60', '#7ac36a', '#5a9bd4', '#faa75b', '#9e67ab', '#ce7058', '#d77fb4']
DAILY_GROWTH = 1.33
CHART_HEIGHT_CM = 20


def render_chart(dataset, category, threshold, events, config=DEFAULT_CONFIG):
    """Draws the aligned series on a log scale and returns a PNG.

    `events` maps countries to the x position of their lockdown line.
    """
    try:
        fig = draw_chart(dataset, category, threshold, events, config)
        out = io.BytesIO()
        fig.savefig(out, format='png')
        return out.getvalue()
    except Exception as e:
        raise RenderError(f"{type(e).__name__}: {e}") from e


def draw_chart(dataset, category, threshold, events, config=DEFAULT_CONFIG):
    """Builds the chart figure without encoding it."""
    height = CHART_HEIGHT_CM / 2.54
    fig = Figure(figsize=(height * (1 + math.sqrt(5)) / 2, height))
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(111, axisbelow=True)
    ax.set_title(f"CoVid-19 - {category.title} - {dataset.latest_date.isoformat()}")
    ax.set_xlabel(f"Days from first {int(threshold)} {category.counted}")
    ax.set_yscale('log')
    ax.xaxis.set_major_locator(MaxNLocator(20))

    handles, labels = [], []
    lockdown_lines = {}
    x_max = 1
    for i, country in enumerate(config.countries):
        if country not in dataset.series: continue
        ys = dataset.series[country].array()
        xs = np.arange(len(ys))
        x_max = max(x_max, len(ys) - 1)
        color = SOFT_COLORS[i % len(SOFT_COLORS)]
        line, = ax.plot(xs, ys, color=color, lw=2)
        handles.append(line)
        labels.append(f"{country} {int(ys[-1]):8d}")
        if country in events:
            lockdown_lines[country] = ax.axvline(events[country], color=color, lw=2, ls='--')

    xs = np.linspace(0, x_max, 200)
    # The reference curve is clipped to the range of the data.
    ylim = ax.get_ylim()
    growth, = ax.plot(xs, threshold * np.power(DAILY_GROWTH, xs), color='gray', lw=2, ls='--')
    ax.set_ylim(ylim)
    handles.append(growth)
    labels.append(f"{round((DAILY_GROWTH - 1) * 100)}% daily growth")

    for country in config.lockdown_dates:
        if country not in lockdown_lines: continue
        handles.append(lockdown_lines[country])
        labels.append(f"{country} - lockdown")

    ax.legend(handles, labels, loc='upper left')
    ax.grid(True, which='major')
    return fig


def generate_chart(category, threshold=None, config=DEFAULT_CONFIG, fetch=fetch_csv):
    """Fetches, aligns and draws one category.  Returns PNG bytes.

    A failure in any stage raises ChartError naming that stage.
    """
    if threshold is None: threshold = config.threshold(category)

    try: text = fetch(category)
    except FetchError as e: raise ChartError("fetch", e) from e

    try: dataset = build_dataset(io.StringIO(text), category, threshold, config)
    except Covid19Error as e: raise ChartError("parse", e) from e
    log.info("%s: data for %s", category.title, dataset.latest_date.isoformat())

    events = event_positions(dataset, config.lockdown_dates)
    try: return render_chart(dataset, category, threshold, events, config)
    except RenderError as e: raise ChartError("render", e) from e
