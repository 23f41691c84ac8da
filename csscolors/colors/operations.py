"""
Color operations modelled on the Less color-operations API.

Each operation is a pure function of its inputs and is also available as a
method on every color. Operations keep the caller's color model: an RGB
color comes back as RGB, an HSLA color as HSLA. HSL based operations work
on a temporary HSLA conversion. ``fadein``, ``fadeout``, ``fade`` and
``mix`` return the alpha variant of the caller's model.
"""
from __future__ import annotations
from fractions import Fraction
from numbers import Integral, Real
from typing import Callable, Tuple, Union

from boundednumbers import clamp

from ..units import Angle, Percentage, Ratio, deg, percent
from ..conversions.numbers import round_half_up
from .color_base import ColorBase
from .color import color_convert, to_hsla, to_rgba, to_alpha_space, alpha_of
from .hsl import HSLA
from .rgb import RGBA

PercentLike = Union[Percentage, Real]
AngleLike = Union[Angle, int]

WHITE = RGBA((255, 255, 255, 1.0))
BLACK = RGBA((0, 0, 0, 1.0))


def _as_percentage(amount: PercentLike) -> Percentage:
    return amount if isinstance(amount, Percentage) else percent(amount)


def _as_angle(amount: AngleLike) -> Angle:
    if isinstance(amount, Angle):
        return amount
    if isinstance(amount, bool) or not isinstance(amount, Integral):
        raise TypeError(f"spin expects whole degrees, got {type(amount).__name__}")
    return deg(amount)


def _map_hsl(
    color: ColorBase,
    fn: Callable[[Angle, Ratio, Ratio], Tuple[Angle, Ratio, Ratio]],
) -> ColorBase:
    """Apply ``fn`` to the HSL channels of ``color`` and return it in its own model."""
    h, s, l, a = to_hsla(color).value
    result = HSLA._from_stored(fn(h, s, l) + (a,))
    return color_convert(result, color.mode)


def lighten(color: ColorBase, amount: PercentLike) -> ColorBase:
    """Increase HSL lightness by an absolute amount, clamped at 100%."""
    delta = _as_percentage(amount).as_ratio()
    return _map_hsl(color, lambda h, s, l: (h, s, l + delta))


def darken(color: ColorBase, amount: PercentLike) -> ColorBase:
    """Decrease HSL lightness by an absolute amount, clamped at 0%."""
    delta = _as_percentage(amount).as_ratio()
    return _map_hsl(color, lambda h, s, l: (h, s, l - delta))


def saturate(color: ColorBase, amount: PercentLike) -> ColorBase:
    """Increase HSL saturation by an absolute amount, clamped at 100%."""
    delta = _as_percentage(amount).as_ratio()
    return _map_hsl(color, lambda h, s, l: (h, s + delta, l))


def desaturate(color: ColorBase, amount: PercentLike) -> ColorBase:
    """Decrease HSL saturation by an absolute amount, clamped at 0%."""
    delta = _as_percentage(amount).as_ratio()
    return _map_hsl(color, lambda h, s, l: (h, s - delta, l))


def greyscale(color: ColorBase) -> ColorBase:
    """Remove all saturation; hue and lightness are kept."""
    return _map_hsl(color, lambda h, s, l: (h, Ratio(0), l))


def spin(color: ColorBase, amount: AngleLike) -> ColorBase:
    """Rotate the hue in either direction, wrapping around 360 degrees."""
    angle = _as_angle(amount)
    return _map_hsl(color, lambda h, s, l: (h + angle, s, l))


def _shift_alpha(color: ColorBase, delta: Fraction) -> ColorBase:
    target = to_alpha_space(color)
    alpha = clamp(float(Fraction(alpha_of(color)) + delta), 0.0, 1.0)
    return target.with_alpha(float(alpha))  # type: ignore


def fadein(color: ColorBase, amount: PercentLike) -> ColorBase:
    """Make a color more opaque by an absolute amount, clamped at 1.0."""
    return _shift_alpha(color, _as_percentage(amount).fraction)


def fadeout(color: ColorBase, amount: PercentLike) -> ColorBase:
    """Make a color more transparent by an absolute amount, clamped at 0.0."""
    return _shift_alpha(color, -_as_percentage(amount).fraction)


def fade(color: ColorBase, amount: PercentLike) -> ColorBase:
    """Set the alpha to exactly ``amount`` percent."""
    return to_alpha_space(color).with_alpha(float(_as_percentage(amount).fraction))  # type: ignore


def mix(color: ColorBase, other: ColorBase, weight: PercentLike = 50) -> ColorBase:
    """
    Mix two colors in variable proportion, taking opacity into account.

    ``weight`` is the share of ``color``. RGB channels are weighted by the
    Less formula, which shifts the balance toward the more opaque color;
    with equal alphas it reduces to ``c1 * p + c2 * (1 - p)``. Alpha is
    always ``a1 * p + a2 * (1 - p)``.

    Args:
        color: First color, its model decides the result model
        other: Second color, any model
        weight: Percentage of ``color`` in the mix

    Returns:
        The mixed color in the alpha variant of ``color``'s model.
    """
    p = _as_percentage(weight).fraction
    *rgb_lhs, a_lhs = to_rgba(color).value
    *rgb_rhs, a_rhs = to_rgba(other).value
    a_lhs, a_rhs = Fraction(a_lhs), Fraction(a_rhs)

    w = 2 * p - 1
    a = a_lhs - a_rhs
    rgb_weight = w if w * a == -1 else (w + a) / (1 + w * a)
    weight_lhs = (rgb_weight + 1) / 2
    weight_rhs = 1 - weight_lhs

    channels = tuple(
        round_half_up(x * weight_lhs + y * weight_rhs) for x, y in zip(rgb_lhs, rgb_rhs)
    )
    alpha = float(a_lhs * p + a_rhs * (1 - p))

    mixed = RGBA((*channels, alpha))
    return color_convert(mixed, "hsla" if color.has_hue else "rgba")


def tint(color: ColorBase, weight: PercentLike) -> ColorBase:
    """Mix ``color`` with white; ``weight`` is the share of ``color``."""
    return color_convert(mix(color, WHITE, weight), color.mode)


def shade(color: ColorBase, weight: PercentLike) -> ColorBase:
    """Mix ``color`` with black; ``weight`` is the share of ``color``."""
    return color_convert(mix(color, BLACK, weight), color.mode)


ColorBase.lighten = lighten
ColorBase.darken = darken
ColorBase.saturate = saturate
ColorBase.desaturate = desaturate
ColorBase.greyscale = greyscale
ColorBase.spin = spin
ColorBase.fadein = fadein
ColorBase.fadeout = fadeout
ColorBase.fade = fade
ColorBase.mix = mix
ColorBase.tint = tint
ColorBase.shade = shade
