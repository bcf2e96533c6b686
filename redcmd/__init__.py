"""Build Redis command argument lists, options and pipelines without a connection."""

__version__ = "0.1.0"