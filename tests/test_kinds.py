import pytest

from pixmill import FilterKind, PatternKind, PatternRequest, UnsupportedFilter, UnsupportedPattern


@pytest.mark.parametrize(
    "name,kind",
    [
        ("blur", FilterKind.BLUR),
        ("  Sharpen ", FilterKind.SHARPEN),
        ("GREYSCALE", FilterKind.GREYSCALE),
        ("grayscale", FilterKind.GREYSCALE),
        (FilterKind.DITHER, FilterKind.DITHER),
    ],
)
def test_filter_parse(name, kind):
    assert FilterKind.parse(name) is kind


@pytest.mark.parametrize("name", ["mosaic", "", None, 3])
def test_filter_parse_rejects(name):
    with pytest.raises(UnsupportedFilter):
        FilterKind.parse(name)


@pytest.mark.parametrize(
    "name,kind",
    [
        ("greek-flag", PatternKind.GREEK_FLAG),
        ("Swiss Flag", PatternKind.SWISS_FLAG),
        ("CHECKERBOARD", PatternKind.CHECKERBOARD),
        (PatternKind.FRENCH_FLAG, PatternKind.FRENCH_FLAG),
    ],
)
def test_pattern_parse(name, kind):
    assert PatternKind.parse(name) is kind


def test_pattern_request_normalizes_kind():
    req = PatternRequest("vertical-rainbow", 3, 7)
    assert req.kind is PatternKind.VERTICAL_RAINBOW
    with pytest.raises(UnsupportedPattern):
        PatternRequest("stars", 3, 7)
