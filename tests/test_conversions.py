import pytest

from randcolour.core.conversions import (
    cmyk_to_rgb,
    get_extrema,
    hex_to_rgb,
    normalize_rgb,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
)
from randcolour.core.errors import MalformedInput, RandcolourError
from randcolour.core.models import RawColour
from randcolour.core.sampler import random_hex, seeded_rng


def test_hex_to_rgb():
    assert hex_to_rgb("ff8000") == (255, 128, 0)
    assert hex_to_rgb("FF8000") == (255, 128, 0)
    assert hex_to_rgb("0a0B0c") == (10, 11, 12)
    assert isinstance(hex_to_rgb("000000"), RawColour)


@pytest.mark.parametrize(
    "value",
    ["zz0000", "ff000", "", "ff00000", "#ff0000", "+f0000", " f0000", "ff_000", "0x00ff"],
)
def test_hex_to_rgb_malformed(value):
    with pytest.raises(MalformedInput):
        hex_to_rgb(value)


def test_hex_to_rgb_rejects_non_strings():
    with pytest.raises(MalformedInput):
        hex_to_rgb(None)
    with pytest.raises(MalformedInput):
        hex_to_rgb(0xFF0000)


def test_malformed_input_is_recoverable_value_error():
    with pytest.raises(ValueError) as excinfo:
        hex_to_rgb("zz0000")
    assert isinstance(excinfo.value, RandcolourError)
    assert excinfo.value.value == "zz0000"
    assert "zz0000" in str(excinfo.value)


@pytest.mark.parametrize("hex_code", ["000000", "ffffff", "ABCDEF", "0a1b2c", "7F7f7F"])
def test_hex_round_trip(hex_code):
    assert rgb_to_hex(*hex_to_rgb(hex_code)) == hex_code.lower()


def test_hex_round_trip_random_samples():
    rng = seeded_rng(1234)
    for _ in range(200):
        hex_code = random_hex(rng)
        assert rgb_to_hex(*hex_to_rgb(hex_code)) == hex_code


def test_rgb_to_hex_clamps_and_rounds():
    assert rgb_to_hex(300, -4, 127.6) == "ff0080"


def test_normalize_rgb_uses_true_division():
    n = normalize_rgb(128, 64, 255)
    assert n.r == pytest.approx(128 / 255)
    assert n.g == pytest.approx(64 / 255)
    assert n.b == 1.0
    assert 0.0 < n.r < 1.0
    assert 0.0 < n.g < 1.0


def test_extrema_min_and_max_are_distinct():
    ext = get_extrema(normalize_rgb(10, 200, 30))
    assert ext.min == pytest.approx(10 / 255)
    assert ext.max == pytest.approx(200 / 255)
    assert ext.min < ext.max
    assert not ext.is_grey
    assert ext.delta == pytest.approx(190 / 255)


def test_extrema_grey():
    ext = get_extrema(normalize_rgb(77, 77, 77))
    assert ext.min == ext.max
    assert ext.is_grey


def test_rgb_to_cmyk_black_and_white():
    assert rgb_to_cmyk(0, 0, 0) == (0.0, 0.0, 0.0, 1.0)
    assert rgb_to_cmyk(255, 255, 255) == (0.0, 0.0, 0.0, 0.0)


def test_rgb_to_cmyk_with_zero_channels():
    assert rgb_to_cmyk(255, 0, 0) == pytest.approx((0.0, 1.0, 1.0, 0.0))
    c, m, y, k = rgb_to_cmyk(0, 128, 0)
    assert (c, m, y) == pytest.approx((1.0, 0.0, 1.0))
    assert k == pytest.approx(1 - 128 / 255)


@pytest.mark.parametrize(
    "rgb",
    [(0, 0, 0), (255, 255, 255), (255, 0, 0), (0, 128, 0), (12, 34, 56), (200, 150, 100), (1, 2, 3)],
)
def test_cmyk_inverse(rgb):
    back = cmyk_to_rgb(*rgb_to_cmyk(*rgb))
    for original, restored in zip(rgb, back):
        assert abs(original - restored) <= 0.5
    assert rgb_to_hex(*back) == rgb_to_hex(*rgb)


def test_rgb_to_hsv_primaries():
    assert rgb_to_hsv(255, 0, 0) == (0.0, 1.0, 1.0)
    assert rgb_to_hsv(0, 255, 0) == pytest.approx((120.0, 1.0, 1.0))
    assert rgb_to_hsv(0, 0, 255) == pytest.approx((240.0, 1.0, 1.0))


def test_hue_tie_break_prefers_red_then_green():
    # red ties with blue, red ties with green, green ties with blue
    assert rgb_to_hsv(255, 0, 255)[0] == pytest.approx(300.0)
    assert rgb_to_hsv(255, 255, 0)[0] == pytest.approx(60.0)
    assert rgb_to_hsv(0, 255, 255)[0] == pytest.approx(180.0)
    assert rgb_to_hsl(255, 0, 255)[0] == pytest.approx(300.0)


def test_rgb_to_hsv_general():
    h, s, v = rgb_to_hsv(200, 150, 100)
    assert h == pytest.approx(30.0)
    assert s == pytest.approx(0.5)
    assert v == pytest.approx(200 / 255)


def test_hue_stays_below_360():
    h, _, _ = rgb_to_hsv(255, 0, 1)
    assert 359.0 < h < 360.0


@pytest.mark.parametrize("value", [0, 1, 128, 254, 255])
def test_grey_has_no_hue_or_saturation(value):
    h, s, v = rgb_to_hsv(value, value, value)
    assert (h, s) == (0.0, 0.0)
    assert v == pytest.approx(value / 255)
    h, s, l = rgb_to_hsl(value, value, value)
    assert (h, s) == (0.0, 0.0)
    assert l == pytest.approx(value / 255)


def test_rgb_to_hsl_fixtures():
    assert rgb_to_hsl(255, 0, 0) == (0.0, 1.0, 0.5)
    assert rgb_to_hsl(0, 0, 0) == (0.0, 0.0, 0.0)
    assert rgb_to_hsl(255, 255, 255) == (0.0, 0.0, 1.0)


@pytest.mark.parametrize("rgb", [(200, 150, 100), (20, 60, 40), (255, 128, 128)])
def test_rgb_to_hsl_saturation_matches_lightness_split(rgb):
    n = normalize_rgb(*rgb)
    ext = get_extrema(n)
    h, s, l = rgb_to_hsl(*rgb)
    if l > 0.5:
        expected = ext.delta / (2 - ext.max - ext.min)
    else:
        expected = ext.delta / (ext.max + ext.min)
    assert s == pytest.approx(expected)
    assert h == pytest.approx(rgb_to_hsv(*rgb)[0])
