"""Shared fixtures for lighthouse-sim tests."""

import pytest

from lighthouse_sim.characteristic import SequenceCompiler


@pytest.fixture
def compiler():
    """Compiler with the built-in tables and default policy constants."""
    return SequenceCompiler()


@pytest.fixture
def catalog_yaml(tmp_path):
    """A small catalog file with one unplaceable entry."""
    path = tmp_path / "lighthouses.yaml"
    path.write_text(
        "lighthouses:\n"
        "  - name: Omaezaki\n"
        "    lat: 34.5955\n"
        "    lon: 138.2260\n"
        "    code: Fl W 10s\n"
        "    range: 19.5\n"
        "  - name: Harbor Entrance\n"
        "    lat: 34.70\n"
        "    lon: 138.50\n"
        "    code: Oc(2+1) R 12s\n"
        "    range: '8 NM'\n"
        "    arcs:\n"
        "      - {start: 250, end: 110, color: R}\n"
        "  - name: Unplotted\n"
        "    code: Iso W 4s\n",
        encoding="utf-8",
    )
    return path
