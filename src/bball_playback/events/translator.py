"""
Translator: StructuredEvent -> English description of the play.

Pure function of the event. Each event type has its own phrasing; double and
triple plays are written with the raw fielder numbers ("6-4-3") and an RBI
count is appended last to whatever the play produced.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Dict, Mapping

from ..data.positions import OUTFIELD_DIRECTIONS, base_name, position_name
from ..schemas import StructuredEvent
from .event_types import BASERUNNING_TYPES, BATTED_OUT_TYPES, EVENT_TYPE_DESCRIPTIONS, HIT_TYPES


UNKNOWN_PLAY = "Unknown play"

# directions that read as "<direction> field"
_OUTFIELD_PHRASES = frozenset({"left", "center", "right", "left-center", "right-center"})
_INFIELD_SIDES = frozenset({"left side", "right side"})


def _join(*parts: str) -> str:
    return " ".join(p for p in parts if p)


def _hit_location(event: StructuredEvent) -> str:
    loc = event.location
    if loc.zone == "outfield" and loc.direction in _OUTFIELD_PHRASES:
        return f"to {loc.direction} field"
    if loc.zone == "infield" and loc.direction in _INFIELD_SIDES:
        return f"to the {loc.direction} of the infield"
    if event.fielders:
        position = event.fielders[0].position
        if position in OUTFIELD_DIRECTIONS:
            return f"to {OUTFIELD_DIRECTIONS[position]} field"
        if 1 <= position <= 6:
            return f"to {position_name(position)}"
    return ""


def _primary_fielder(event: StructuredEvent):
    for f in event.fielders:
        if f.role == "primary":
            return f
    return None


def _fielder_numbers(event: StructuredEvent) -> str:
    return "-".join(str(f.position) for f in event.fielders)


def _multi_play(event: StructuredEvent, kind: str) -> str:
    numbers = _fielder_numbers(event)
    return _join("Grounded into a", numbers, kind)


def _hit(event: StructuredEvent) -> str:
    return _join(EVENT_TYPE_DESCRIPTIONS[event.primary_event_type], _hit_location(event))


def _batted_out(event: StructuredEvent) -> str:
    word = EVENT_TYPE_DESCRIPTIONS[event.primary_event_type]
    fielders = event.fielders
    if len(fielders) == 2 and fielders[1].role == "putout":
        first, second = fielders
        return (
            f"{word} to {position_name(first.position)}, "
            f"throw to {position_name(second.position)}"
        )
    primary = _primary_fielder(event)
    if primary is not None:
        return f"{word} to {position_name(primary.position)}"
    return word


def _error(event: StructuredEvent) -> str:
    for f in event.fielders:
        if f.role == "error":
            return f"Error by {position_name(f.position)}"
    return "Error"


def _fielders_choice(event: StructuredEvent) -> str:
    word = EVENT_TYPE_DESCRIPTIONS["FC"]
    if not event.fielders:
        return word
    names = ", ".join(position_name(f.position) for f in event.fielders)
    return f"{word} to {names}"


# used when no runner was recorded
_BASE_RUNNING_NOUNS: Mapping[str, str] = MappingProxyType({
    "SB": "Stolen base",
    "CS": "Caught stealing",
    "PO": "Pickoff",
    "POCS": "Pickoff, caught stealing",
})


def _base_running(event: StructuredEvent) -> str:
    if not event.base_running:
        return _BASE_RUNNING_NOUNS[event.primary_event_type]
    word = EVENT_TYPE_DESCRIPTIONS[event.primary_event_type]
    runner = event.base_running[0]
    # a pickoff names the base the runner was standing on
    base = runner.from_base if event.primary_event_type == "PO" else runner.to_base
    return f"{word} {base_name(base)}"


def _sacrifice_bunt(event: StructuredEvent) -> str:
    word = EVENT_TYPE_DESCRIPTIONS["SH"]
    fielders = event.fielders
    if len(fielders) == 2:
        return f"{word}, {position_name(fielders[0].position)} to {position_name(fielders[1].position)}"
    if len(fielders) == 1:
        return f"{word} to {position_name(fielders[0].position)}"
    return word


def _sacrifice_fly(event: StructuredEvent) -> str:
    word = EVENT_TYPE_DESCRIPTIONS["SF"]
    primary = _primary_fielder(event)
    if primary is not None:
        return f"{word} to {position_name(primary.position)}"
    return word


def _literal(event: StructuredEvent) -> str:
    return EVENT_TYPE_DESCRIPTIONS[event.primary_event_type]


_RENDERERS: Dict[str, Callable[[StructuredEvent], str]] = {
    **{t: _hit for t in HIT_TYPES},
    **{t: _batted_out for t in BATTED_OUT_TYPES},
    **{t: _base_running for t in BASERUNNING_TYPES},
    "E": _error,
    "FC": _fielders_choice,
    "SH": _sacrifice_bunt,
    "SF": _sacrifice_fly,
}


def describe(event: StructuredEvent, unknown_text: str = UNKNOWN_PLAY) -> str:
    """Describe the play itself, without the RBI suffix."""
    if event.is_triple_play:
        return _multi_play(event, "triple play")
    if event.is_double_play:
        return _multi_play(event, "double play")

    event_type = event.primary_event_type
    renderer = _RENDERERS.get(event_type)
    if renderer is not None:
        return renderer(event)
    if event_type in EVENT_TYPE_DESCRIPTIONS:
        return _literal(event)
    return unknown_text


def render(event: StructuredEvent, unknown_text: str = UNKNOWN_PLAY) -> str:
    """Render ``event`` as a sentence, e.g. "Home run to left field, 4 RBI".

    ``unknown_text`` is returned for an event whose type was not recognized.
    A zero RBI count adds nothing.
    """
    text = describe(event, unknown_text)
    if event.rbi and text:
        text = f"{text}, {event.rbi} RBI"
    return text
