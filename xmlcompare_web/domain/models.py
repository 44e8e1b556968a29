######## models.py
########

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Optional, Sequence

MISSING_IN_FIRST = "[Missing in first file]"
MISSING_IN_SECOND = "[Missing in second file]"
NON_XML_DIFFERENT = "Binary files or non-XML text files are different."


def extension_of(name: str) -> str:
    return PurePath(name or "").suffix.lstrip(".").lower()


@dataclass(frozen=True)
class FileInput:
    name: str
    content: bytes
    extension: str

    @classmethod
    def from_bytes(cls, name: str, content: bytes) -> "FileInput":
        return cls(name=name, content=bytes(content), extension=extension_of(name))


@dataclass(frozen=True)
class DifferenceRecord:
    line_number: Optional[int]      # 1-based; None for the whole-file record
    first: Optional[str]            # None -> absent in the first file
    second: Optional[str]           # None -> absent in the second file
    note: str = ""

    @property
    def missing_in_first(self) -> bool:
        return self.line_number is not None and self.first is None

    @property
    def missing_in_second(self) -> bool:
        return self.line_number is not None and self.second is None

    def describe(self) -> str:
        if self.line_number is None:
            return self.note
        first = MISSING_IN_FIRST if self.first is None else self.first
        second = MISSING_IN_SECOND if self.second is None else self.second
        return f"Line {self.line_number}:\n- {first}\n+ {second}"


class OutcomeStatus(str, Enum):
    PENDING = "pending"
    IDENTICAL = "identical"
    DIFFERENT = "different"
    ERROR = "error"


@dataclass(frozen=True)
class ComparisonOutcome:
    status: OutcomeStatus
    differences: tuple[DifferenceRecord, ...] = ()
    message: str = ""

    @classmethod
    def pending(cls) -> "ComparisonOutcome":
        return cls(status=OutcomeStatus.PENDING)

    @classmethod
    def identical(cls) -> "ComparisonOutcome":
        return cls(status=OutcomeStatus.IDENTICAL)

    @classmethod
    def different(cls, records: Sequence[DifferenceRecord]) -> "ComparisonOutcome":
        # may be empty: "known non-identical, diff unavailable"
        return cls(status=OutcomeStatus.DIFFERENT, differences=tuple(records))

    @classmethod
    def error(cls, message: str) -> "ComparisonOutcome":
        return cls(status=OutcomeStatus.ERROR, message=message)

    @property
    def is_identical(self) -> bool:
        return self.status is OutcomeStatus.IDENTICAL

    @property
    def is_different(self) -> bool:
        return self.status is OutcomeStatus.DIFFERENT

    @property
    def is_error(self) -> bool:
        return self.status is OutcomeStatus.ERROR
