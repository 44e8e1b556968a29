import re
from dataclasses import dataclass

INTER_TAG_WHITESPACE = re.compile(r">\s+<")


class XmlNormalizer:
    """Strategy interface."""
    def normalize(self, text: str) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class InterTagWhitespaceNormalizer(XmlNormalizer):
    """
    Collapses whitespace runs sitting between '>' and '<'.
    Purely textual: no parsing, so malformed XML goes through the same substitution.
    """

    def normalize(self, text: str) -> str:
        return INTER_TAG_WHITESPACE.sub("><", text or "")
