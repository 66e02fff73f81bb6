"""Aligned COVID-19 growth charts from the JHU CSSE time series."""
