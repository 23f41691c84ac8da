import pickle
import pytest
from csscolors import (
    RGB, RGBA, HSL, HSLA, rgb, rgba, hsl, hsla, Ratio, percent,
    ColorRangeError, ColorError,
)
from ..samples import samples_rgb_hsl
from ..utils import assert_approximately_eq


def test_constructors_store_channels():
    assert rgb(5, 10, 15).value == (5, 10, 15)
    assert rgba(5, 10, 15, 1.0).value == (5, 10, 15, 1.0)
    assert hsl(6, 93, 71).value == (6, Ratio.from_percentage(93), Ratio.from_percentage(71))
    assert hsla(6, 93, 71, 1.0).value == (6, 237, 181, 1.0)


def test_class_constructors_match_functions():
    assert RGB((5, 10, 15)) == rgb(5, 10, 15)
    assert RGBA((5, 10, 15, 0.5)) == rgba(5, 10, 15, 0.5)
    assert HSL((6, 93, 71)) == hsl(6, 93, 71)
    assert HSLA((6, 93, 71, 0.5)) == hsla(6, 93, 71, 0.5)


def test_channel_properties():
    tomato = rgba(255, 99, 71, 0.5)
    assert (tomato.red, tomato.green, tomato.blue, tomato.alpha) == (255, 99, 71, 0.5)

    color = hsla(90, 100, 50, 0.25)
    assert (color.hue, color.saturation, color.lightness, color.alpha) == (90, 100, 50, 0.25)


def test_mode_flags():
    assert not rgb(1, 2, 3).has_alpha
    assert rgba(1, 2, 3, 1.0).has_alpha
    assert not rgb(1, 2, 3).has_hue
    assert hsl(1, 2, 3).has_hue
    assert hsla(1, 2, 3, 0.5).has_alpha
    assert hsla(1, 2, 3, 0.5).mode == "hsla"


def test_hue_360_normalizes_to_zero():
    assert hsl(360, 50, 50) == hsl(0, 50, 50)
    assert hsl(360, 50, 50).hue == 0


def test_colors_are_immutable():
    color = rgb(1, 2, 3)
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        color.red = 4
    with pytest.raises(AttributeError):
        color.extra = 1


def test_equality_is_model_sensitive():
    assert rgb(0, 0, 0) != rgba(0, 0, 0, 1.0)
    assert rgb(127, 255, 0) != hsl(90, 100, 50)
    assert rgb(127, 255, 0).to_hsl() == hsl(90, 100, 50)
    assert hsl(6, 93, 71) != hsla(6, 93, 71, 1.0)


def test_hash_follows_equality():
    assert hash(rgb(1, 2, 3)) == hash(rgb(1, 2, 3))
    assert len({hsl(10, 20, 30), hsl(10, 20, 30), hsla(10, 20, 30, 1.0)}) == 2


def test_hsl_equality_uses_whole_percentages():
    lightened = hsl(90, 100, 50).lighten(percent(1))
    assert lightened.value[2] != hsl(90, 100, 51).value[2]
    assert lightened == hsl(90, 100, 51)
    assert hash(lightened) == hash(hsl(90, 100, 51))
    assert repr(lightened) == repr(hsl(90, 100, 51))
    assert lightened != hsl(90, 100, 52)
    assert hsla(90, 100, 50, 0.5).lighten(1) == hsla(90, 100, 51, 0.5)
    assert hsla(90, 100, 50, 0.5).lighten(1) != hsla(90, 100, 51, 0.25)


def test_repr_shows_fields():
    assert repr(rgb(5, 10, 15)) == "RGB(red=5, green=10, blue=15)"
    assert repr(hsla(6, 93, 71, 0.5)) == "HSLA(hue=6, saturation=93, lightness=71, alpha=0.5)"


def test_pickle_round_trip():
    for color in (rgb(5, 10, 15), rgba(5, 10, 15, 0.3), hsl(6, 93, 71), hsla(6, 93, 71, 0.3)):
        assert pickle.loads(pickle.dumps(color)) == color


def test_with_alpha():
    color = rgba(1, 2, 3, 0.5)
    assert color.with_alpha(0.25) == rgba(1, 2, 3, 0.25)
    assert color == rgba(1, 2, 3, 0.5)
    assert hsla(10, 20, 30, 1.0).with_alpha(0) == hsla(10, 20, 30, 0.0)


def test_as_unit():
    assert rgb(255, 0, 51).as_unit() == (1.0, 0.0, 0.2)
    assert rgba(0, 0, 0, 0.5).as_unit() == (0.0, 0.0, 0.0, 0.5)
    assert hsl(180, 100, 100).as_unit() == (180.0, 1.0, 1.0)


def test_construct_from_other_color_converts():
    assert HSL(rgb(127, 255, 0)) == hsl(90, 100, 50)
    assert RGBA(rgb(1, 2, 3)) == rgba(1, 2, 3, 1.0)


@pytest.mark.parametrize("args", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_rgb_out_of_range(args):
    with pytest.raises(ColorRangeError):
        rgb(*args)


def test_range_error_names_field_and_bounds():
    with pytest.raises(ColorRangeError) as info:
        rgb(0, 256, 0)
    assert info.value.field == "green"
    assert (info.value.lower, info.value.upper) == (0, 255)
    assert isinstance(info.value, ColorError)
    assert isinstance(info.value, ValueError)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: hsl(361, 50, 50),
        lambda: hsl(-1, 50, 50),
        lambda: hsl(10, 101, 50),
        lambda: hsl(10, 50, -5),
        lambda: rgba(0, 0, 0, 1.5),
        lambda: rgba(0, 0, 0, -0.1),
        lambda: hsla(0, 0, 0, 2.0),
    ],
)
def test_out_of_range_construction_fails(factory):
    with pytest.raises(ColorRangeError):
        factory()


def test_non_integer_channels_rejected():
    with pytest.raises(TypeError):
        rgb(1.5, 2, 3)
    with pytest.raises(TypeError):
        rgb("1", 2, 3)
    with pytest.raises(TypeError):
        hsl(10.5, 20, 30)
    with pytest.raises(TypeError):
        hsl(90, 50.5, 30)
    with pytest.raises(TypeError):
        hsla(90, 50, 49.9, 1.0)


def test_wrong_channel_count():
    with pytest.raises(ValueError):
        RGB((1, 2))
    with pytest.raises(ValueError):
        HSLA((1, 2, 3))


def test_sample_construction_in_both_models():
    for (r, g, b), (h, s, l) in samples_rgb_hsl.items():
        assert_approximately_eq(rgb(r, g, b).to_hsl(), hsl(h, s, l))
        assert_approximately_eq(hsl(h, s, l).to_rgb(), rgb(r, g, b))
