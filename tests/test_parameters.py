from __future__ import annotations

import pytest

from galaxygenerator.model.parameters import (
    COLOR_LABELS,
    PARAMETER_SPECS,
    GalaxyParameters,
    hex_to_rgb,
)


def test_defaults():
    params = GalaxyParameters()

    assert params.count == 150_000
    assert params.size == 0.01
    assert params.radius == 5.0
    assert params.branches == 10
    assert params.spin == 1.0
    assert params.randomness == 0.2
    assert params.randomness_power == 7.0
    assert params.inside_color == "#ff6030"
    assert params.outside_color == "#1b3984"


def test_every_field_has_a_label():
    params = GalaxyParameters()
    assert set(PARAMETER_SPECS) | set(COLOR_LABELS) == set(params.as_dict())


def test_clamped_respects_ui_bounds():
    params = GalaxyParameters(
        count=5, size=1.0, radius=-3.0, branches=40, spin=9.0, randomness=-1.0, randomness_power=0.2
    )
    clamped = params.clamped()

    assert clamped.count == 100
    assert clamped.size == 0.1
    assert clamped.radius == 0.01
    assert clamped.branches == 20
    assert clamped.spin == 5.0
    assert clamped.randomness == 0.0
    assert clamped.randomness_power == 1.0
    # The original is left alone
    assert params.count == 5


def test_clamped_rounds_integer_fields():
    clamped = GalaxyParameters(count=1234.4, branches=3.6).clamped()

    assert clamped.count == 1234
    assert isinstance(clamped.count, int)
    assert clamped.branches == 4


def test_copy_is_independent():
    params = GalaxyParameters()
    other = params.copy()
    other.count = 100

    assert params.count == 150_000


def test_hex_to_rgb():
    assert hex_to_rgb("#ff0000") == (1.0, 0.0, 0.0)
    assert hex_to_rgb("1b3984") == pytest.approx((27 / 255, 57 / 255, 132 / 255))
    assert GalaxyParameters().inside_rgb() == pytest.approx((1.0, 96 / 255, 48 / 255))


@pytest.mark.parametrize("value", ["", "#fff", "#gggggg", "ff60300", None])
def test_hex_to_rgb_rejects_malformed(value):
    with pytest.raises(ValueError):
        hex_to_rgb(value)
