from __future__ import annotations

import re
from dataclasses import dataclass

from xmlcompare_web.domain.models import DifferenceRecord

# separators, not terminators: "a\n" is ["a", ""]
LINE_SEPARATOR = re.compile(r"\r\n|[\n\r\x0b\x0c\x85\u2028\u2029]")


def split_lines(text: str) -> list[str]:
    return LINE_SEPARATOR.split(text or "")


class LineDiffer:
    """Strategy interface."""
    def diff(self, first_text: str, second_text: str) -> list[DifferenceRecord]:
        raise NotImplementedError


@dataclass(frozen=True)
class PositionalLineDiffer(LineDiffer):
    """
    Compares two documents line by line by index.
    No realignment: a single inserted line shifts every later line into a reported difference.
    """

    def diff(self, first_text: str, second_text: str) -> list[DifferenceRecord]:
        first_lines = split_lines(first_text)
        second_lines = split_lines(second_text)
        common = min(len(first_lines), len(second_lines))

        records: list[DifferenceRecord] = []

        for i in range(common):
            a = first_lines[i].strip()
            b = second_lines[i].strip()
            # a blank line on either side is never reported at that position
            if a != b and a and b:
                records.append(DifferenceRecord(line_number=i + 1, first=a, second=b))

        if len(first_lines) > len(second_lines):
            for i in range(common, len(first_lines)):
                line = first_lines[i].strip()
                if line:
                    records.append(DifferenceRecord(line_number=i + 1, first=line, second=None))
        elif len(second_lines) > len(first_lines):
            for i in range(common, len(second_lines)):
                line = second_lines[i].strip()
                if line:
                    records.append(DifferenceRecord(line_number=i + 1, first=None, second=line))

        return records
