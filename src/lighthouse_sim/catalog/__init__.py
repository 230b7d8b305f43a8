"""Lighthouse catalog records and loading."""

from .schema import Lighthouse, SectorArc, parse_range_meters, NM_TO_METERS
from .loader import load_catalog, save_catalog

__all__ = [
    "Lighthouse",
    "SectorArc",
    "parse_range_meters",
    "NM_TO_METERS",
    "load_catalog",
    "save_catalog",
]
