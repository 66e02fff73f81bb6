import logging
import os

from flask import Flask, Response, abort

from covidplot.category import Category
from covidplot.chart import generate_chart
from covidplot.config import DEFAULT_CONFIG
from covidplot.errors import ChartError
from covidplot.fetch import fetch_csv

log = logging.getLogger(__name__)

PAGE = """<!DOCTYPE html>
<html>
	<head>
		<title>COVID-19</title>
	</head>
	<body>
		<div id="content">
			<img class="plot" src="/img-confirmed"/>
			<img class="plot" src="/img-deaths"/>
		</div>
	</body>
</html>
"""


def save_image(save_dir, category, png):
    path = os.path.join(save_dir, f"covid-{category.slug}.png")
    with open(path, 'wb') as f:
        f.write(png)
    return path


def create_app(config=DEFAULT_CONFIG, save_dir=None, fetch=fetch_csv):
    """Builds the app serving the page and an image route for each category.

    If `save_dir` is given, every image served is also written there.
    """
    app = Flask(__name__)

    @app.route('/')
    def index():
        return Response(PAGE, mimetype='text/html')

    @app.route('/img-<name>')
    def image(name):
        try: category = Category.parse(name)
        except ValueError: abort(404)
        try:
            png = generate_chart(category, config.threshold(category), config, fetch)
        except ChartError as e:
            log.error("error: %s", e)
            return Response(str(e), status=500, mimetype='text/plain')
        if save_dir is not None:
            try: save_image(save_dir, category, png)
            except OSError as e: log.error("error: could not save image: %s", e)
        return Response(png, mimetype='image/png')

    return app
