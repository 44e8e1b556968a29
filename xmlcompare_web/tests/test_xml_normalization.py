import pytest

from xmlcompare_web.services.xml_normalization import InterTagWhitespaceNormalizer


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", ""),
        ("<a><b/></a>", "<a><b/></a>"),                          # nothing between tags -> unchanged
        ("<a>\n  <b/>\n</a>", "<a><b/></a>"),
        ("<a>\r\n\t<b/>\r\n</a>", "<a><b/></a>"),
        ("<a> text </a>", "<a> text </a>"),                      # text content is not touched
        ("<a>x</a>   <b>y</b>", "<a>x</a><b>y</b>"),
        ("<a attr = \"1\" >  <b/>", "<a attr = \"1\" ><b/>"),    # only the run between > and <
        ("<a>\n<b>\n", "<a><b>\n"),                              # trailing run has no closing <
        ("< a >  < b", "< a >< b"),                              # malformed input, same substitution
        ("plain text", "plain text"),
    ],
)
def test_normalize(raw, expected):
    assert InterTagWhitespaceNormalizer().normalize(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "<a>\n  <b/>\n</a>",
        ">  <  <  >",
        "<x> <y> </y> </x>\n",
        "text > \n < more",
    ],
)
def test_normalize_is_idempotent(raw):
    norm = InterTagWhitespaceNormalizer()
    once = norm.normalize(raw)
    assert norm.normalize(once) == once


def test_unicode_whitespace_between_tags_is_removed():
    assert InterTagWhitespaceNormalizer().normalize("<a>\u2003\u00a0<b/>") == "<a><b/>"
