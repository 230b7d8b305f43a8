"""Tests for the lighthouse catalog."""

import math

import pytest

from lighthouse_sim.catalog import Lighthouse, SectorArc, load_catalog, parse_range_meters, save_catalog
from lighthouse_sim.characteristic import LightType


@pytest.mark.parametrize(
    "value,meters",
    [
        (10, 18520.0),
        (19.5, 19.5 * 1852),
        ("8", 8 * 1852),
        ("18.5 NM", 18.5 * 1852),
        (" 3", 3 * 1852),
    ],
)
def test_parse_range_meters(value, meters):
    assert parse_range_meters(value) == pytest.approx(meters)


@pytest.mark.parametrize("value", [None, 0, -2, "abc", "", math.inf, math.nan, True])
def test_parse_range_meters_rejects(value):
    assert parse_range_meters(value) is None


def test_load_catalog(catalog_yaml, capsys):
    lighthouses = load_catalog(catalog_yaml)

    assert [lh.name for lh in lighthouses] == ["Omaezaki", "Harbor Entrance"]
    assert "Unplotted" in capsys.readouterr().out

    harbor = lighthouses[1]
    assert harbor.descriptor.type is LightType.OCCULTING
    assert harbor.color == "R"
    assert harbor.range_meters == pytest.approx(8 * 1852)
    assert harbor.arcs == [SectorArc(250.0, 110.0, "R")]


def test_load_catalog_top_level_list(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- {name: A, lat: 1.0, lon: 2.0, code: Q W}\n")

    lighthouses = load_catalog(path)

    assert lighthouses == [Lighthouse("A", 1.0, 2.0, "Q W")]


def test_entry_without_code_is_an_error(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- {name: A, lat: 1.0, lon: 2.0}\n")

    with pytest.raises(ValueError, match="code"):
        load_catalog(path)


def test_arc_without_bounds_is_an_error(tmp_path):
    path = tmp_path / "arcs.yaml"
    path.write_text("- {name: Pier, lat: 1.0, lon: 2.0, code: Q W, arcs: [{start: 10, color: R}]}\n")

    with pytest.raises(ValueError, match="Pier"):
        load_catalog(path)


def test_unparseable_code_is_kept_with_default_color(tmp_path):
    path = tmp_path / "odd.yaml"
    path.write_text("- {name: Odd, lat: 1.0, lon: 2.0, code: 'Fl(2) W R'}\n- {name: Bad, lat: 1, lon: 2, code: '???'}\n")

    odd, bad = load_catalog(path)

    assert odd.color == "W/R"
    assert bad.descriptor is None
    assert bad.color == "W"


def test_save_and_reload(tmp_path):
    path = tmp_path / "out.yaml"
    lighthouses = [
        Lighthouse("御前崎", 34.5955, 138.226, "Fl W 10s", 19.5, [SectorArc(0, 180, "W")]),
        Lighthouse("Breakwater", 34.7, 138.5, "Oc R 4s"),
    ]

    save_catalog(lighthouses, path)

    assert load_catalog(path) == lighthouses
