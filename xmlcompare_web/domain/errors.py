######## errors.py
########


class ComparisonError(Exception):
    """Base class for failures that end a comparison with an error outcome."""


class ReadError(ComparisonError):
    """File missing, unreadable, permission-denied or not a regular file."""


class DecodeError(ComparisonError):
    """Bytes could not be decoded as text on the XML path."""
