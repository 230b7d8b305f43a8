#!/usr/bin/env python3
"""
Report catalog entries whose light characteristic does not parse.

Unparseable codes show up as blank lights in the simulator, so run this
after editing a catalog:

    python scripts/check_catalog.py data/lighthouses.yaml
"""

import sys
from collections import Counter
from pathlib import Path

from lighthouse_sim.catalog import load_catalog


def check_catalog(catalog_path: Path) -> tuple[int, list[tuple[str, str]]]:
    """Returns (total entries, [(name, code)] for entries that fail to parse)."""
    lighthouses = load_catalog(catalog_path)
    failures = [(lh.name, lh.code) for lh in lighthouses if lh.descriptor is None]
    return len(lighthouses), failures


def main():
    if len(sys.argv) != 2:
        print(f"Usage: {sys.argv[0]} CATALOG.yaml")
        return 2

    catalog_path = Path(sys.argv[1])
    if not catalog_path.exists():
        print(f"Error: catalog not found: {catalog_path}")
        return 1

    total, failures = check_catalog(catalog_path)

    for name, code in failures:
        print(f"  {name}: {code!r}")

    print()
    print(f"Checked {total} lights, {len(failures)} unparseable")

    if failures:
        # Most common offending codes first
        counts = Counter(code for _, code in failures)
        print("Most common:")
        for code, n in counts.most_common(10):
            print(f"  {n:4d}  {code}")
        return 1
    return 0


if __name__ == "__main__":
    exit(main())
