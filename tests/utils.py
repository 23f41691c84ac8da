from csscolors import ColorBase


def _close(a, b, tolerance=1):
    return abs(int(a) - int(b)) <= tolerance


def approximately_eq(lhs: ColorBase, rhs: ColorBase) -> bool:
    """Same model, channels within one unit (percent for HSL), identical alpha."""
    if type(lhs) is not type(rhs):
        return False
    if lhs.to_css() == rhs.to_css():
        return True
    if lhs.has_hue:
        hue_diff = abs(lhs.hue - rhs.hue)
        channels_ok = (
            min(hue_diff, 360 - hue_diff) <= 1
            and _close(lhs.saturation, rhs.saturation)
            and _close(lhs.lightness, rhs.lightness)
        )
    else:
        channels_ok = all(_close(a, b) for a, b in zip(lhs.value[:3], rhs.value[:3]))
    if lhs.has_alpha:
        return channels_ok and lhs.alpha == rhs.alpha
    return channels_ok


def assert_approximately_eq(lhs, rhs):
    assert approximately_eq(lhs, rhs), f"lhs: {lhs}, rhs: {rhs}"
