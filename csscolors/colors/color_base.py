from __future__ import annotations
from numbers import Integral, Real
from typing import Any, ClassVar, Tuple, Callable, Union

from ..errors import ColorRangeError
from ..types.color_types import ColorSpace, ALPHA_SPACES, HUE_SPACES, ScalarVector
from ..types.format_type import ALPHA_PRECISION
from ..conversions.numbers import MAX_BYTE, HUE_360
from ..units import Ratio, Angle
from abc import ABC


def coerce_byte(name: str, value: Any) -> int:
    """Validate an RGB channel: an integer in [0, 255]."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= MAX_BYTE:
        raise ColorRangeError(name, value, 0, MAX_BYTE)
    return int(value)


def coerce_hue(value: Any) -> Angle:
    """Validate a hue: whole degrees in [0, 360], 360 normalizing to 0."""
    if isinstance(value, Angle):
        return value
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"hue must be an integer, got {type(value).__name__}")
    if not 0 <= value <= HUE_360:
        raise ColorRangeError("hue", value, 0, HUE_360)
    return Angle(value)


def coerce_percentage(name: str, value: Any) -> Ratio:
    """Validate saturation/lightness: a whole percentage in [0, 100]; Ratio instances pass through."""
    if isinstance(value, Ratio):
        return value
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer percentage, got {type(value).__name__}")
    if not 0 <= value <= 100:
        raise ColorRangeError(name, value, 0, 100)
    return Ratio.from_percentage(value)


def coerce_alpha(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"alpha must be a number, got {type(value).__name__}")
    if not 0.0 <= value <= 1.0:
        raise ColorRangeError("alpha", value, 0.0, 1.0)
    return round(float(value), ALPHA_PRECISION)


class ColorBase:
    """
    Immutable color value.

    Subclasses fix the color space (``mode``) and the channel layout.
    Instances are frozen once ``__init__`` finishes; every operation returns
    a new instance. Equality is model sensitive: an RGB color never equals
    an HSL color, even when they describe the same shade. Convert first.
    Within a model, colors compare by the fields their properties expose.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, ...]]

    # Injected by colors.color
    convert: Callable[[ColorBase, ColorSpace], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, value: Union[ScalarVector, ColorBase]) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                value = value.convert(self.mode)
            value = value.value
        else:
            value = tuple(value)
            if len(value) != self.num_channels:
                raise ValueError(
                    f"{self.mode} expects {self.num_channels} channels, got {len(value)}"
                )
            value = self._coerce(value)

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _coerce(cls, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        raise NotImplementedError

    @classmethod
    def _from_stored(cls, value: Tuple[Any, ...]):
        """Build an instance from already validated storage values."""
        return cls(cls._wrap_stored(value))

    @classmethod
    def _wrap_stored(cls, value: Tuple[Any, ...]) -> Tuple[Any, ...]:
        return tuple(value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Any, ...]:
        """Stored channels. HSL saturation and lightness are :class:`Ratio` bytes."""
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode in ALPHA_SPACES

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other):
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._fields() == other._fields()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.mode, self._fields()))

    def __iter__(self):
        return iter(self._value)

    def __len__(self):
        return self.num_channels

    def __repr__(self):
        fields = ", ".join(
            f"{name}={value!r}" for name, value in zip(self.channel_names, self._fields())
        )
        return f"{self.__class__.__name__}({fields})"

    def _fields(self) -> Tuple[Any, ...]:
        """Channels as the public properties expose them; equality, hashing and repr use these."""
        return tuple(self._value)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (self.__class__, (self._value,))


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    mode: ClassVar[ColorSpace]
    value: Tuple[Any, ...]

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> float:
        """Alpha as a float in [0.0, 1.0]."""
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: Real):
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha in [0.0, 1.0].

        Returns:
            New color instance with updated alpha.
        """
        new_vals = tuple(self.value[:-1]) + (coerce_alpha(alpha),)
        return self.__class__._from_stored(new_vals)  # type: ignore


def build_registry(*classes: type[ColorBase]):
    return {cls.mode: cls for cls in classes}
