import pytest
from csscolors import rgb, rgba, hsl, hsla, from_hex, RGB, RGBA, ColorFormatError


@pytest.mark.parametrize(
    "color, expected",
    [
        (rgb(255, 99, 71), "rgb(255, 99, 71)"),
        (rgb(0, 0, 0), "rgb(0, 0, 0)"),
        (rgba(255, 99, 71, 0.5), "rgba(255, 99, 71, 0.50)"),
        (rgba(255, 99, 71, 1.0), "rgba(255, 99, 71, 1.00)"),
        (rgba(255, 99, 71, 0.0), "rgba(255, 99, 71, 0.00)"),
        (hsl(9, 100, 64), "hsl(9, 100%, 64%)"),
        (hsl(360, 0, 0), "hsl(0, 0%, 0%)"),
        (hsla(90, 100, 50, 1.0), "hsla(90, 100%, 50%, 1.00)"),
        (hsla(6, 93, 71, 0.25), "hsla(6, 93%, 71%, 0.25)"),
    ],
)
def test_to_css(color, expected):
    assert color.to_css() == expected
    assert str(color) == expected


def test_to_css_after_conversion():
    assert rgb(255, 99, 71).to_hsl().to_css() == "hsl(9, 100%, 64%)"
    assert rgb(127, 255, 0).to_hsla().to_css() == "hsla(90, 100%, 50%, 1.00)"


def test_to_hex():
    assert rgb(5, 10, 255).to_hex() == "#050aff"
    assert rgba(5, 10, 255, 1.0).to_hex() == "#050affff"
    assert rgba(5, 10, 255, 0.0).to_hex() == "#050aff00"
    assert rgb(255, 171, 205).to_hex() == "#ffabcd"
    assert rgb(250, 128, 114).to_hex() == "#fa8072"
    assert rgba(250, 128, 114, 0.5).to_hex() == "#fa807280"
    assert hsl(6, 93, 71).to_hex() == "#fa7e70"
    assert hsla(6, 93, 71, 1.0).to_hex() == "#fa7e70ff"


def test_from_hex():
    assert from_hex("#050aff") == rgb(5, 10, 255)
    assert from_hex("#FFABCD") == rgb(255, 171, 205)
    assert from_hex("#050affff") == rgba(5, 10, 255, 1.0)
    assert from_hex("#050aff00") == rgba(5, 10, 255, 0.0)
    assert isinstance(from_hex("#000000"), RGB)
    assert isinstance(from_hex("#00000080"), RGBA)


def test_hex_round_trip():
    for text in ("#050aff", "#ffabcd", "#00000080", "#12345678"):
        assert from_hex(text).to_hex() == text


@pytest.mark.parametrize(
    "text",
    ["", "050aff", "#05af", "#050af", "#050aff0", "#050affff0", "#gggggg", "rgb(0, 0, 0)", " #050aff"],
)
def test_from_hex_rejects_malformed(text):
    with pytest.raises(ColorFormatError):
        from_hex(text)


def test_from_hex_rejects_non_strings():
    with pytest.raises(ColorFormatError):
        from_hex(0x050AFF)
