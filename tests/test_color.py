import pytest

from synopsia.color import (
    BLACK,
    HIGH_ENTROPY,
    LOW_ENTROPY,
    MAX_ENTROPY,
    MED_ENTROPY,
    MED_HIGH_ENTROPY,
    MED_LOW_ENTROPY,
    WHITE,
    Color,
    ColorGradient,
    Stop,
)


def test_default_color_is_opaque_black():
    assert Color() == Color(0, 0, 0, 255)


def test_argb_round_trip():
    c = Color(18, 52, 86, 120)
    assert Color.from_argb(c.to_argb()) == c


def test_to_argb_layout():
    c = Color(0x12, 0x34, 0x56, 0x78)
    assert c.to_argb() == 0x78123456


def test_to_rgba_layout():
    c = Color(0x12, 0x34, 0x56, 0x78)
    assert c.to_rgba() == 0x12345678


def test_from_argb_ignores_high_bits():
    c = Color(1, 2, 3, 4)
    assert Color.from_argb(c.to_argb() | (1 << 40)) == c


@pytest.mark.parametrize("bad", [-1, 256])
def test_channel_out_of_range_raises(bad):
    with pytest.raises(ValueError):
        Color(bad, 0, 0)


def test_default_gradient_matches_create_default():
    assert ColorGradient() == ColorGradient.create_default()
    assert len(ColorGradient().stops) == 6


@pytest.mark.parametrize(
    "position, expected",
    [
        (0.0, LOW_ENTROPY),
        (0.25, MED_LOW_ENTROPY),
        (0.5, MED_ENTROPY),
        (0.7, MED_HIGH_ENTROPY),
        (0.85, HIGH_ENTROPY),
        (1.0, MAX_ENTROPY),
    ],
)
def test_default_gradient_at_stops(position, expected):
    assert ColorGradient.create_default().sample(position) == expected


def test_sample_clamps():
    g = ColorGradient.create_default()
    assert g.sample(-5.0) == LOW_ENTROPY
    assert g.sample(5.0) == MAX_ENTROPY


def test_sample_entropy_scales_by_eight():
    g = ColorGradient.create_default()
    assert g.sample_entropy(8.0) == MAX_ENTROPY
    assert g.sample_entropy(0.0) == LOW_ENTROPY
    assert g.sample_entropy(4.0) == g.sample(0.5)


def test_empty_gradient_samples_default_color():
    assert ColorGradient([]).sample(0.3) == Color()


def test_stops_are_sorted():
    g = ColorGradient([Stop(1.0, WHITE), Stop(0.0, BLACK)])
    assert [s.position for s in g.stops] == [0.0, 1.0]
    assert g.sample(0.0) == BLACK
    assert g.sample(1.0) == WHITE


def test_grayscale_midpoint_truncates():
    assert ColorGradient.create_grayscale().sample(0.5) == Color(127, 127, 127, 255)


def test_grayscale_is_monotonic():
    g = ColorGradient.create_grayscale()
    values = [g.sample(i / 20).r for i in range(21)]
    assert values == sorted(values)
    assert values[0] == 0 and values[-1] == 255
    for i in range(21):
        c = g.sample(i / 20)
        assert c.r == c.g == c.b


def test_simple_gradient_endpoints_and_bounds():
    low = Color(10, 200, 30, 40)
    high = Color(250, 20, 90, 255)
    g = ColorGradient.create_simple(low, high)
    assert g.sample(0.0) == low
    assert g.sample(1.0) == high
    mid = g.sample(0.37)
    for ch in ("r", "g", "b", "a"):
        lo, hi = sorted((getattr(low, ch), getattr(high, ch)))
        assert lo <= getattr(mid, ch) <= hi


def test_fire_gradient_stops():
    g = ColorGradient.create_fire()
    assert g.sample(0.0) == Color(0, 0, 0)
    assert g.sample(0.25) == Color(128, 0, 0)
    assert g.sample(0.5) == Color(255, 64, 0)
    assert g.sample(0.75) == Color(255, 192, 0)
    assert g.sample(1.0) == Color(255, 255, 224)


def test_single_stop_gradient_is_constant():
    c = Color(5, 6, 7, 8)
    g = ColorGradient([Stop(0.5, c)])
    assert g.sample(0.0) == c
    assert g.sample(0.9) == c


def test_interpolated_value_between_neighbouring_stops():
    g = ColorGradient.create_default()
    c = g.sample(0.6)
    for ch in ("r", "g", "b"):
        lo, hi = sorted((getattr(MED_ENTROPY, ch), getattr(MED_HIGH_ENTROPY, ch)))
        assert lo <= getattr(c, ch) <= hi