"""Tests for the light characteristic parser."""

import pytest

from lighthouse_sim.characteristic import Descriptor, LightType, group_counts, parse_light_code

# ============================================================================
# Well-formed codes
# ============================================================================


def test_parse_group_flash_with_colors_and_period():
    """The canonical round-trip example parses into all four fields."""
    parsed = parse_light_code("Fl(2+1) W G 10s")

    assert parsed == Descriptor(LightType.FLASH, "2+1", ("W", "G"), 10.0)
    assert parsed.type == "FL"


@pytest.mark.parametrize(
    "code,expected_type",
    [
        ("F R", LightType.FIXED),
        ("Dir W", LightType.DIRECTIONAL),
        ("Dir F W R G", LightType.DIRECTIONAL_FIXED),
        ("Fl W 5s", LightType.FLASH),
        ("Gp Fl(3) W 15s", LightType.GROUP_FLASH),
        ("GpFl(3) W 15s", LightType.GROUP_FLASH),
        ("LFl W 10s", LightType.LONG_FLASH),
        ("Q W", LightType.QUICK),
        ("VQ(6) W 10s", LightType.VERY_QUICK),
        ("UQ W", LightType.ULTRA_QUICK),
        ("IQ G 15s", LightType.INTERRUPTED_QUICK),
        ("Oc R 4s", LightType.OCCULTING),
        ("Gp Oc(3) W 12s", LightType.GROUP_OCCULTING),
        ("Iso G 4s", LightType.ISOPHASE),
        ("Al W R 6s", LightType.ALTERNATING),
        ("Al Fl W R 10s", LightType.ALTERNATING_FLASH),
        ("Al Oc W G 8s", LightType.ALTERNATING_OCCULTING),
        ("Al Iso W R 4s", LightType.ALTERNATING_ISOPHASE),
        ("FFl R 12s", LightType.FIXED_AND_FLASHING),
        ("Fl F W 10s", LightType.FLASH_FIXED),
        ("Mo(U) W 15s", LightType.MORSE),
    ],
)
def test_parse_every_light_type(code, expected_type):
    """Each type token resolves to its canonical member, compound ones included."""
    parsed = parse_light_code(code)

    assert parsed is not None
    assert parsed.type is expected_type


def test_compound_token_is_not_parsed_as_bare_flash():
    parsed = parse_light_code("Gp Fl(2) R 6s")

    assert parsed.type is LightType.GROUP_FLASH
    assert parsed.type != LightType.FLASH


def test_whitespace_and_case_are_normalized():
    parsed = parse_light_code("   iso    w \t 6S  ")

    assert parsed == Descriptor(LightType.ISOPHASE, None, ("W",), 6.0)


def test_amber_keeps_two_letter_spelling():
    parsed = parse_light_code("Fl W am AM 5s")

    assert parsed.colors == ("W", "Am", "Am")


def test_color_order_is_preserved():
    parsed = parse_light_code("Al Fl G R W 9s")

    assert parsed.colors == ("G", "R", "W")


def test_optional_parts_are_absent():
    parsed = parse_light_code("F R")

    assert parsed.group_param is None
    assert parsed.period is None


@pytest.mark.parametrize(
    "code,period",
    [
        ("Iso W 6", 6.0),
        ("Iso W 2.5s", 2.5),
        ("Iso W .5s", 0.5),
        ("Iso W 0s", 0.0),
    ],
)
def test_period_forms(code, period):
    assert parse_light_code(code).period == pytest.approx(period)


def test_group_param_is_captured_verbatim():
    """The parser does not interpret the parameter; Morse uses letters."""
    assert parse_light_code("Mo(A) W 6s").group_param == "A"
    assert parse_light_code("Fl(2+1) W 10s").group_param == "2+1"


# ============================================================================
# Rejected codes
# ============================================================================


@pytest.mark.parametrize(
    "code",
    [
        "Xyz W",
        "Fl",
        "Fl ",
        "",
        "   ",
        "Fl B 10s",
        "Fl WR 10s",
        "Fl(2)W 10s",
        "Fl W 10x",
        "Fl W 10s extra",
        "Fl W -5s",
        "Fl W 1.2.3s",
        "W Fl 10s",
    ],
)
def test_unparseable_codes_return_none(code):
    assert parse_light_code(code) is None


@pytest.mark.parametrize("value", [None, 12, b"Fl W 5s"])
def test_non_string_input_returns_none(value):
    assert parse_light_code(value) is None


def test_parse_is_pure():
    code = "Gp Oc(2+1) W R 12s"

    assert parse_light_code(code) == parse_light_code(code)


# ============================================================================
# Group parameter decomposition
# ============================================================================


@pytest.mark.parametrize(
    "param,counts",
    [
        (None, [1]),
        ("", [1]),
        ("3", [3]),
        ("2+1", [2, 1]),
        ("2 + 2", [2, 2]),
        ("A", [1]),
        ("2+x", [2]),
        ("0", [1]),
    ],
)
def test_group_counts(param, counts):
    assert group_counts(param) == counts
