#!/usr/bin/env python3
# Serves a page with the aligned confirmed/deaths charts.
import argparse
import logging
import os

from covidplot.config import DEFAULT_CONFIG
from covidplot.fetch import JHU_URL_FORMAT, fetch_csv
from covidplot.server import create_app

parser = argparse.ArgumentParser(description='Serve COVID-19 growth charts aligned on a case threshold.')
parser.add_argument("--host", default="0.0.0.0")
parser.add_argument("--port", default=8080, type=int)
parser.add_argument("--save_dir", default=None)
    # Also write covid-<category>.png here every time a chart is served.
parser.add_argument("--url_format", default=JHU_URL_FORMAT)
    # {slug} is replaced by "confirmed" or "deaths".


def main():
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="covid19: %(message)s")
    if args.save_dir is not None and not os.path.exists(args.save_dir):
        os.makedirs(args.save_dir)

    def fetch(category): return fetch_csv(category, args.url_format)

    app = create_app(DEFAULT_CONFIG, save_dir=args.save_dir, fetch=fetch)
    logging.info("ready to serve...")
    app.run(host=args.host, port=args.port)


if __name__ == '__main__':
    main()
