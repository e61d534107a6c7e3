"""
Static field tables for Retrosheet notation.

Fielders are numbered 1-9 (pitcher through right fielder). Bases are the
characters used in advancement clauses: "1", "2", "3" and "H" for home.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


UNKNOWN_FIELDER = "unknown fielder"

FIELD_POSITION_NAMES: Mapping[int, str] = MappingProxyType({
    0: UNKNOWN_FIELDER,
    1: "pitcher",
    2: "catcher",
    3: "first baseman",
    4: "second baseman",
    5: "third baseman",
    6: "shortstop",
    7: "left fielder",
    8: "center fielder",
    9: "right fielder",
})

# 7/8/9 also name the part of the outfield a ball was hit to
OUTFIELD_DIRECTIONS: Mapping[int, str] = MappingProxyType({
    7: "left",
    8: "center",
    9: "right",
})

BASE_NAMES: Mapping[str, str] = MappingProxyType({
    "1": "first base",
    "2": "second base",
    "3": "third base",
    "H": "home",
})

# base a runner leaves when attempting to steal the key base
STEAL_ORIGIN: Mapping[str, str] = MappingProxyType({
    "2": "1",
    "3": "2",
    "H": "3",
})


def position_name(position: int) -> str:
    return FIELD_POSITION_NAMES.get(position, UNKNOWN_FIELDER)


def zone_for(position: int) -> str:
    """Return "infield" for 1-6, "outfield" for 7-9, "" otherwise."""
    if 1 <= position <= 6:
        return "infield"
    if 7 <= position <= 9:
        return "outfield"
    return ""


def base_name(base: str) -> str:
    return BASE_NAMES.get(base, f"base {base}")
