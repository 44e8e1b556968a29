from .comparison_service import ComparisonService
from .line_differ import LineDiffer, PositionalLineDiffer
from .xml_normalization import XmlNormalizer, InterTagWhitespaceNormalizer

__all__ = [
    "ComparisonService",
    "LineDiffer",
    "PositionalLineDiffer",
    "XmlNormalizer",
    "InterTagWhitespaceNormalizer",
]
