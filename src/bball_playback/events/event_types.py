"""
Closed set of primary event types and their English descriptions.

Tags follow the Retrosheet event file format
(https://www.retrosheet.org/eventfile.htm).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import FrozenSet, Mapping


HIT_TYPES: FrozenSet[str] = frozenset({"S", "D", "T", "HR", "DGR"})
BATTED_OUT_TYPES: FrozenSet[str] = frozenset({"G", "F", "L", "P"})
OUT_TYPES: FrozenSet[str] = BATTED_OUT_TYPES | {"K"}
SACRIFICE_TYPES: FrozenSet[str] = frozenset({"SH", "SF"})
BASERUNNING_TYPES: FrozenSet[str] = frozenset({"SB", "CS", "PO", "POCS"})
OTHER_TYPES: FrozenSet[str] = frozenset({"W", "IW", "HP", "E", "FC", "WP", "PB", "BK", "NP"})

EVENT_TYPES: FrozenSet[str] = (
    HIT_TYPES | OUT_TYPES | SACRIFICE_TYPES | BASERUNNING_TYPES | OTHER_TYPES
)

EVENT_TYPE_DESCRIPTIONS: Mapping[str, str] = MappingProxyType({
    # hits
    "S": "Single",
    "D": "Double",
    "T": "Triple",
    "HR": "Home run",
    "DGR": "Ground rule double",
    # outs
    "K": "Struck out",
    "G": "Groundout",
    "F": "Flyout",
    "L": "Lineout",
    "P": "Popup",
    # sacrifices
    "SH": "Sacrifice bunt",
    "SF": "Sacrifice fly",
    # batter reaches
    "W": "Walk",
    "IW": "Intentional walk",
    "HP": "Hit by pitch",
    "E": "Error by",
    "FC": "Reached on a fielder's choice",
    # base running
    "SB": "Stole",
    "CS": "Caught stealing",
    "PO": "Picked off",
    "POCS": "Picked off and caught stealing",
    # misc
    "WP": "Wild pitch",
    "PB": "Passed ball",
    "BK": "Balk",
    "NP": "No play",
})

# leading letter of a modifier token -> batted-ball trajectory
TRAJECTORIES: Mapping[str, str] = MappingProxyType({
    "F": "fly ball",
    "L": "line drive",
    "G": "ground ball",
    "P": "popup",
})

# trailing letter of a modifier token -> depth
DEPTHS: Mapping[str, str] = MappingProxyType({
    "D": "deep",
    "S": "shallow",
    "M": "medium",
})


def default_out_type(position: int) -> str:
    """Out type for an unassisted play by a lone fielder: outfielders catch fly balls."""
    return "F" if 7 <= position <= 9 else "G"
