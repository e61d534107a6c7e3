"""
Modifier processor for the "/" tokens of an event code.

A modifier refines where and how the ball was hit ("F7D": deep fly ball to
left) and, for a play recorded as a lone fielder number, decides the out
type ("5/L5" is a lineout, not the groundout a bare "5" defaults to).
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from ..data.positions import OUTFIELD_DIRECTIONS, zone_for
from ..schemas import FielderInfo, LocationInfo, StructuredEvent
from .event_types import DEPTHS, TRAJECTORIES, default_out_type


# two-fielder location codes: the ball went between the two fielders
SPLIT_LOCATIONS: Mapping[str, Tuple[str, str]] = MappingProxyType({
    "78": ("left-center", "outfield"),
    "89": ("right-center", "outfield"),
    "56": ("left side", "infield"),
    "34": ("right side", "infield"),
})

LETTER_DIRECTIONS: Mapping[str, str] = MappingProxyType({
    "L": "left",
    "R": "right",
    "C": "center",
})

_LONE_FIELDER = re.compile(r"^[0-9]$")
_FIELDER_DIGIT = re.compile(r"[0-9]")


def apply_location_code(code: str, location: LocationInfo, fielders: Tuple[FielderInfo, ...]):
    """Apply a location code ("7", "78", "8D", "L") to ``location``.

    Returns the updated ``(location, fielders)``; a single fielder digit is
    appended to ``fielders`` when that position is not already on the play.
    """
    split = SPLIT_LOCATIONS.get(code[:2])
    if split:
        direction, zone = split
        return location.model_copy(update={"direction": direction, "zone": zone}), fielders

    update = {}
    digit = _FIELDER_DIGIT.match(code)
    if digit:
        position = int(digit.group(0))
        zone = zone_for(position)
        if zone:
            update["zone"] = zone
        if position in OUTFIELD_DIRECTIONS:
            update["direction"] = OUTFIELD_DIRECTIONS[position]
        if all(f.position != position for f in fielders):
            fielders = fielders + (FielderInfo(position=position, role="primary"),)
    elif code[:1] in LETTER_DIRECTIONS:
        update["direction"] = LETTER_DIRECTIONS[code[0]]

    if update:
        location = location.model_copy(update=update)
    return location, fielders


def apply_modifier(event: StructuredEvent, modifier: str, lone_fielder: bool) -> StructuredEvent:
    location = event.location
    fielders = event.fielders
    update = {}

    letter = modifier[:1]
    if letter in TRAJECTORIES:
        location = location.model_copy(update={"trajectory": TRAJECTORIES[letter]})
        location, fielders = apply_location_code(modifier[1:], location, fielders)
        # the trajectory letter decides the out type when the primary did not
        if lone_fielder or (not event.primary_event_type and fielders):
            update.update({"primary_event_type": letter, "is_out": True, "out_count": 1})

    depth = DEPTHS.get(modifier[-1:])
    if depth:
        location = location.model_copy(update={"depth": depth})

    if "L" in modifier and not modifier.startswith("L"):
        location = location.model_copy(update={"direction": "left"})
    elif "R" in modifier and not modifier.startswith("R"):
        location = location.model_copy(update={"direction": "right"})

    update["location"] = location
    update["fielders"] = fielders
    return event.model_copy(update=update)


def apply_modifiers(event: StructuredEvent, modifiers: Iterable[str], primary: str) -> StructuredEvent:
    """Fold every modifier token into ``event``, in source order."""
    lone_fielder = bool(_LONE_FIELDER.match(primary))
    for modifier in modifiers:
        if modifier:
            event = apply_modifier(event, modifier, lone_fielder)

    if not event.primary_event_type and event.fielders and lone_fielder:
        event = event.model_copy(update={
            "primary_event_type": default_out_type(int(primary)),
            "is_out": True,
            "out_count": 1,
        })
    return event
