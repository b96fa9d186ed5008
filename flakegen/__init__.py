"""flakegen — reproducible build and dev-environment descriptor generator."""

__version__ = "0.1.0"
