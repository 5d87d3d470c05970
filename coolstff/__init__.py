"""coolstff - catalog, engagement and admin API for an affiliate content marketplace."""

__version__ = "0.1.0"
