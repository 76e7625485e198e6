# exceptions.py
"""Contains custom exceptions"""


class ConfigError(Exception):
    """Is raised when a required setting is missing or malformed."""
    pass


class NoDataFoundError(Exception):
    """Is raised when a database query returns no data."""
    pass