"""Panel nesting and cut-list layout for sheet goods."""

__version__ = "0.1.0"
