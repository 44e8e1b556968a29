from .errors import ComparisonError, DecodeError, ReadError
from .models import ComparisonOutcome, DifferenceRecord, FileInput, OutcomeStatus

__all__ = [
    "ComparisonError",
    "DecodeError",
    "ReadError",
    "ComparisonOutcome",
    "DifferenceRecord",
    "FileInput",
    "OutcomeStatus",
]
