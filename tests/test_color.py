"""Tests for color tokens and conversions."""

import pytest

from lighthouse_sim.characteristic import (
    HSV,
    COLOR_MAP,
    color_to_hsv,
    dim,
    extract_color,
    hex_to_hsv,
    hsv_to_hex,
    resolve_color,
)


@pytest.mark.parametrize(
    "code,token",
    [
        ("Fl W 5s", "W"),
        ("Iso am 4s", "Am"),
        ("Fl W R 5s", "W/R"),
        ("Dir F W R G", "W/R/G"),
        ("not a light", "W"),
        ("", "W"),
    ],
)
def test_extract_color(code, token):
    assert extract_color(code) == token


def test_every_composite_from_extract_color_is_renderable():
    for code in ("Fl W R 5s", "Fl W G 5s", "Fl R G 5s", "Fl W R G 5s"):
        assert extract_color(code) in COLOR_MAP


def test_resolve_color_uses_default_map():
    assert resolve_color("W/R") == "orange"
    assert resolve_color("Am") == "#FFBF00"


def test_resolve_color_fallback_and_custom_map():
    assert resolve_color("R/Y") == "white"
    assert resolve_color("R", {"R": "#FF3030"}) == "#FF3030"
    assert resolve_color("W", {}, default="gray") == "gray"


def test_hex_round_trip():
    assert hex_to_hsv("#FF0000") == HSV(0.0, 1.0, 1.0)
    assert hex_to_hsv("fff") == HSV(0.0, 0.0, 1.0)
    assert hsv_to_hex(HSV(0.0, 0.0, 1.0)) == "#FFFFFF"


def test_amber_hue():
    hsv = color_to_hsv("#FFBF00")

    assert hsv.hue == pytest.approx(45 / 360, abs=1e-3)
    assert hsv.value == pytest.approx(1.0)


def test_named_colors():
    assert color_to_hsv("White") == HSV(0.0, 0.0, 1.0)
    assert color_to_hsv("orange").saturation == 1.0


@pytest.mark.parametrize("value", ["purple", "#12", "#GGGGGG"])
def test_invalid_colors_raise(value):
    with pytest.raises(ValueError):
        color_to_hsv(value)


def test_every_default_map_value_converts():
    for value in COLOR_MAP.values():
        color_to_hsv(value)


def test_dim_clamps():
    assert dim(HSV(0.5, 1.0, 1.0), 0.4).value == pytest.approx(0.4)
    assert dim(HSV(0.5, 1.0, 0.8), 2.0).value == 1.0
