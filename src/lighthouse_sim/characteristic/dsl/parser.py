"""
Light characteristic notation parser.

Parses chart abbreviations like "Fl(2+1) W R 15s", "Iso G 4s",
"Mo(U) W 15s" into a Descriptor. The parser knows nothing about
timing; interpretation of the group parameter is left to the compiler.
"""

from __future__ import annotations

import re

from ..core.types import Descriptor, LightType


# Compound tokens come first so "Gp Fl" never matches as bare "Fl"
_TYPE_PATTERN = (
    r"Gp\s*Fl|Gp\s*Oc|Al\s*Fl|Al\s*Oc|Al\s*Iso|Al"
    r"|Fl\s*F|FFl|LFl|Iso|Oc|Fl|Mo|VQ|UQ|IQ|Q|Dir\s*F|Dir|F"
)
_COLOR_PATTERN = r"(?:Am|[WRGY])"
_PERIOD_PATTERN = r"(?:\d+(?:\.\d*)?|\.\d+)"

LIGHT_CODE_RE = re.compile(
    rf"(?P<type>{_TYPE_PATTERN})"
    r"(?:\((?P<param>[^)]+)\))?"
    rf" (?P<colors>{_COLOR_PATTERN}(?: {_COLOR_PATTERN})*)"
    rf"(?: (?P<period>{_PERIOD_PATTERN})s?)?",
    re.IGNORECASE,
)


def normalize_code(code: str) -> str:
    """Trim a code and collapse internal whitespace runs to single spaces."""
    return " ".join(code.split())


def normalize_color(token: str) -> str:
    """Canonical spelling of a color token ("am" -> "Am", "w" -> "W")."""
    upper = token.upper()
    return "Am" if upper == "AM" else upper


def parse_light_code(code: str) -> Descriptor | None:
    """
    Parse a light characteristic into a Descriptor.

    Grammar (after whitespace normalization):
        <type>[(<param>)] <color> [<color> ...] [<period>[s]]

    Examples:
        "Fl(2+1) W G 10s" -> Descriptor(FL, "2+1", ("W", "G"), 10.0)
        "Gp Oc(3) R 12s"  -> Descriptor(GP OC, "3", ("R",), 12.0)
        "F R"             -> Descriptor(F, None, ("R",), None)

    Returns:
        Descriptor, or None if the code does not match the grammar in full.
    """
    if not isinstance(code, str):
        return None

    match = LIGHT_CODE_RE.fullmatch(normalize_code(code))
    if match is None:
        return None

    light_type = LightType.from_token(match.group("type"))
    if light_type is None:
        return None

    colors = tuple(normalize_color(c) for c in match.group("colors").split(" "))
    period_text = match.group("period")
    period = float(period_text) if period_text is not None else None

    return Descriptor(
        type=light_type,
        group_param=match.group("param"),
        colors=colors,
        period=period,
    )


def group_counts(param: str | None) -> list[int]:
    """
    Split a group parameter into flash counts.

    "2+1" -> [2, 1], "3" -> [3], None -> [1].
    Entries that are not positive integers are dropped; if nothing
    usable remains the result is [1].
    """
    if not param:
        return [1]

    counts = []
    for part in param.split("+"):
        part = part.strip()
        if part.isascii() and part.isdigit() and int(part) > 0:
            counts.append(int(part))

    return counts or [1]
