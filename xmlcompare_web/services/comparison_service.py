from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from xmlcompare_web.domain.errors import DecodeError, ReadError
from xmlcompare_web.domain.models import (
    NON_XML_DIFFERENT,
    ComparisonOutcome,
    DifferenceRecord,
    FileInput,
)
from xmlcompare_web.repositories.file_repository import FileRepository
from xmlcompare_web.services.binary_comparator import bytes_identical, first_mismatch_offset
from xmlcompare_web.services.line_differ import LineDiffer
from xmlcompare_web.services.xml_normalization import XmlNormalizer

logger = logging.getLogger(__name__)

Source = Union[FileInput, str, Path]

# UTF-32 first: its little-endian BOM starts with the UTF-16 one
_BOM_CODECS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def decode_text(file_input: FileInput, encoding: str = "utf-8-sig") -> str:
    codec = encoding
    for bom, bom_codec in _BOM_CODECS:
        if file_input.content.startswith(bom):
            codec = bom_codec
            break
    try:
        return file_input.content.decode(codec)
    except UnicodeDecodeError as e:
        raise DecodeError(
            f"{Path(file_input.name).name} is not valid {codec} text "
            f"(byte {e.start}: {e.reason})"
        ) from e


@dataclass
class ComparisonService:
    """
    Service layer: orchestrates one "compare two files" operation.
    Binary fast path first, XML-aware path when both inputs are XML, single-record verdict otherwise.
    Never raises for bad input; every failure becomes an error outcome.
    """
    file_repo: FileRepository
    normalizer: XmlNormalizer
    line_differ: LineDiffer
    xml_extensions: frozenset[str] = field(default_factory=lambda: frozenset({"xml"}))
    encoding: str = "utf-8-sig"

    def compare_paths(
        self,
        first_path: Union[str, Path],
        second_path: Union[str, Path],
    ) -> ComparisonOutcome:
        return self.compare_sources(first_path, second_path)

    def compare_sources(self, first: Source, second: Source) -> ComparisonOutcome:
        """
        Each side is either an already-loaded FileInput (e.g. an upload) or a path to read.
        Both sides must load before anything is compared.
        """
        try:
            first_input = self._resolve(first)
            second_input = self._resolve(second)
        except ReadError as e:
            logger.warning("Read failed: %s", e)
            return ComparisonOutcome.error(f"Error comparing files: {e}")

        return self.compare(first_input, second_input)

    def compare(self, first: FileInput, second: FileInput) -> ComparisonOutcome:
        if bytes_identical(first.content, second.content):
            logger.info("Compared %s and %s: identical bytes", first.name, second.name)
            return ComparisonOutcome.identical()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Byte mismatch at offset %d (sizes %d / %d)",
                first_mismatch_offset(first.content, second.content),
                len(first.content),
                len(second.content),
            )

        if self.is_xml(first) and self.is_xml(second):
            return self._compare_xml(first, second)

        logger.info("Compared %s and %s: different (non-XML)", first.name, second.name)
        return ComparisonOutcome.different([DifferenceRecord(None, None, None, note=NON_XML_DIFFERENT)])

    def _resolve(self, source: Source) -> FileInput:
        if isinstance(source, FileInput):
            return source
        return self.file_repo.load(source)

    def is_xml(self, file_input: FileInput) -> bool:
        return (file_input.extension or "").lower() in self.xml_extensions

    def _compare_xml(self, first: FileInput, second: FileInput) -> ComparisonOutcome:
        try:
            first_text = decode_text(first, self.encoding)
            second_text = decode_text(second, self.encoding)
        except DecodeError as e:
            logger.warning("Decode failed: %s", e)
            return ComparisonOutcome.error(f"Error comparing XML files: {e}")

        if self.normalizer.normalize(first_text) == self.normalizer.normalize(second_text):
            logger.info("Compared %s and %s: identical after normalization", first.name, second.name)
            return ComparisonOutcome.identical()

        # line report runs on the original texts, not the normalized ones
        records = self.line_differ.diff(first_text, second_text)
        logger.info(
            "Compared %s and %s: different (%d line records)", first.name, second.name, len(records)
        )
        return ComparisonOutcome.different(records)
