"""
Lighthouse catalog loader.

Catalogs are YAML files listing charted lights, either as a top-level
list or under a "lighthouses" key.

Format:
    lighthouses:
      - name: Omaezaki
        lat: 34.5955
        lon: 138.2260
        code: Fl W 10s
        range: 19.5
        arcs:
          - {start: 250, end: 110, color: W}
"""

from pathlib import Path
from typing import Any
import yaml

from .schema import Lighthouse, SectorArc


def load_catalog(catalog_path: Path) -> list[Lighthouse]:
    """
    Load all lighthouses from a catalog file.

    Entries without numeric lat/lon cannot be placed on a map and are
    skipped with a warning.

    Raises:
        ValueError: If an entry is missing its name or code, or has an
            arc without start/end
    """
    with open(catalog_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or []

    if isinstance(data, dict):
        data = data.get("lighthouses") or []

    result: list[Lighthouse] = []
    for idx, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise ValueError(f"Catalog entry {idx} is not a mapping")

        lat, lon = entry.get("lat"), entry.get("lon")
        if not _is_number(lat) or not _is_number(lon):
            print(f"[CATALOG] Warning: skipping {entry.get('name', f'entry {idx}')}: no position")
            continue

        result.append(_parse_entry(entry, idx))

    return result


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_entry(entry: dict, idx: int) -> Lighthouse:
    """Build a Lighthouse from one catalog mapping."""
    for key in ("name", "code"):
        if not entry.get(key):
            raise ValueError(f"Catalog entry {idx} is missing '{key}'")

    arcs = []
    for arc_data in entry.get("arcs") or []:
        if not isinstance(arc_data, dict) or "start" not in arc_data or "end" not in arc_data:
            raise ValueError(f"Catalog entry {idx} ({entry['name']}) has an arc without start/end")
        arcs.append(SectorArc(
            start=float(arc_data["start"]),
            end=float(arc_data["end"]),
            color=str(arc_data.get("color", "W")),
        ))

    return Lighthouse(
        name=str(entry["name"]),
        lat=float(entry["lat"]),
        lon=float(entry["lon"]),
        code=str(entry["code"]),
        range_nm=entry.get("range"),
        arcs=arcs,
    )


def save_catalog(lighthouses: list[Lighthouse], catalog_path: Path) -> None:
    """Save lighthouses to a catalog file."""
    entries: list[dict[str, Any]] = []
    for lh in lighthouses:
        entry: dict[str, Any] = {
            "name": lh.name,
            "lat": lh.lat,
            "lon": lh.lon,
            "code": lh.code,
        }
        if lh.range_nm is not None:
            entry["range"] = lh.range_nm
        if lh.arcs:
            entry["arcs"] = [
                {"start": a.start, "end": a.end, "color": a.color}
                for a in lh.arcs
            ]
        entries.append(entry)

    with open(catalog_path, "w", encoding="utf-8") as f:
        yaml.dump({"lighthouses": entries}, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
