"""Bundlio - static asset bundler for script and stylesheet packages."""

__version__ = "0.1.0"
