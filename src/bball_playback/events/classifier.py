"""
Primary-event classifier.

Reads the primary token of an event code (the text before the first "/"
modifier and the first "." advancement) and fixes the play's category and
the fielders named in it.

Codes share prefixes ("SB2" starts like a single, "SF7" like a flyout), so
the patterns below are tried strictly in order and the first match wins:

1. stolen base / caught stealing
2. sacrifice bunt / fly
3. hits (DGR before D)
4. strikeout and batted-ball outs
5. walks and hit by pitch
6. errors
7. fielder's choice
8. pickoffs
9. wild pitch, passed ball, balk, no play
10. bare fielder chain ("7", "31", "643")
"""

from __future__ import annotations

import re
from typing import Callable, Optional, Tuple

from ..data.positions import OUTFIELD_DIRECTIONS, STEAL_ORIGIN, zone_for
from ..schemas import BaseRunningInfo, FielderInfo, LocationInfo, StructuredEvent
from .event_types import default_out_type


Handler = Callable[[re.Match, StructuredEvent], StructuredEvent]

_STEAL_TOKEN = re.compile(r"^(SB|CS)([23H])(?:\(([1-9]+)\))?")


def fielder_chain(digits: str) -> Tuple[FielderInfo, ...]:
    """Assign roles along the path of the ball: first fielder, assists, putout."""
    last = len(digits) - 1
    chain = []
    for i, d in enumerate(digits):
        if i == 0:
            role = "primary"
        elif i == last:
            role = "putout"
        else:
            role = "assist"
        chain.append(FielderInfo(position=int(d), role=role))
    return tuple(chain)


def _chain_fielders(group: Optional[str]) -> Optional[Tuple[int, ...]]:
    if not group:
        return None
    return tuple(int(d) for d in group)


def hit_location(position: int) -> LocationInfo:
    return LocationInfo(
        zone=zone_for(position),
        direction=OUTFIELD_DIRECTIONS.get(position, ""),
    )


# -- handlers -----------------------------------------------------------------

def _stolen_base(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    # "SB3;SB2" and "SB2;CS3(25)" record every runner in source order
    runners = []
    for token in m.string.split(";"):
        sm = _STEAL_TOKEN.match(token.strip())
        if sm:
            kind, base, group = sm.groups()
            runners.append(BaseRunningInfo(
                from_base=STEAL_ORIGIN[base],
                to_base=base,
                is_out=kind == "CS",
                fielders=_chain_fielders(group),
            ))
    update = {
        "primary_event_type": "SB",
        "base_running": event.base_running + tuple(runners),
    }
    if any(r.is_out for r in runners):
        update.update({"is_out": True, "out_count": 1})
    return event.model_copy(update=update)


def _caught_stealing(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    base = m.group(1)
    runner = BaseRunningInfo(
        from_base=STEAL_ORIGIN[base],
        to_base=base,
        is_out=True,
        fielders=_chain_fielders(m.group(2)),
    )
    return event.model_copy(update={
        "primary_event_type": "CS",
        "base_running": event.base_running + (runner,),
        "is_out": True,
        "out_count": 1,
    })


def _sacrifice(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    return event.model_copy(update={
        "primary_event_type": m.group(1),
        "fielders": fielder_chain(m.group(2)),
        "is_out": True,
        "out_count": 1,
    })


def _hit(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    update = {"primary_event_type": m.group(1)}
    if m.group(2):
        position = int(m.group(2))
        update["fielders"] = (FielderInfo(position=position, role="primary"),)
        update["location"] = hit_location(position)
    return event.model_copy(update=update)


def _strikeout(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    return event.model_copy(update={"primary_event_type": "K", "is_out": True, "out_count": 1})


def _batted_out(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    digits = m.group(2)
    double_play = len(digits) >= 2
    return event.model_copy(update={
        "primary_event_type": m.group(1),
        "fielders": fielder_chain(digits),
        "is_out": True,
        "is_double_play": double_play,
        "out_count": 2 if double_play else 1,
    })


def _exact(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    return event.model_copy(update={"primary_event_type": m.group(1)})


def _error(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    return event.model_copy(update={
        "primary_event_type": "E",
        "fielders": (FielderInfo(position=int(m.group(1)), role="error"),),
        "is_error": True,
    })


def _fielders_choice(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    fielders = ()
    if m.group(1):
        fielders = (FielderInfo(position=int(m.group(1)), role="primary"),)
    return event.model_copy(update={
        "primary_event_type": "FC",
        "fielders": fielders,
        "is_fielders_choice": True,
    })


def _pickoff(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    base = m.group(1)
    runner = BaseRunningInfo(
        from_base=base,
        to_base=base,
        is_out=True,
        fielders=_chain_fielders(m.group(2)),
    )
    return event.model_copy(update={
        "primary_event_type": "PO",
        "base_running": event.base_running + (runner,),
        "is_out": True,
        "out_count": 1,
    })


def _pickoff_caught_stealing(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    base = m.group(1)
    runner = BaseRunningInfo(
        from_base=STEAL_ORIGIN[base],
        to_base=base,
        is_out=True,
        fielders=_chain_fielders(m.group(2)),
    )
    return event.model_copy(update={
        "primary_event_type": "POCS",
        "base_running": event.base_running + (runner,),
        "is_out": True,
        "out_count": 1,
    })


def _fielder_play(m: re.Match, event: StructuredEvent) -> StructuredEvent:
    digits = m.group(0)
    n = len(digits)
    if n == 1:
        event_type = default_out_type(int(digits))
    else:
        event_type = "G"
    return event.model_copy(update={
        "primary_event_type": event_type,
        "fielders": fielder_chain(digits),
        "is_out": True,
        "is_double_play": n == 3,
        "is_triple_play": n > 3,
        "out_count": 3 if n > 3 else 2 if n == 3 else 1,
    })


# Order is significant; see module docstring.
PRIMARY_EVENT_RULES: Tuple[Tuple[re.Pattern, Handler], ...] = (
    (re.compile(r"^SB[23H]"), _stolen_base),
    (re.compile(r"^CS([23H])(?:\(([1-9]+)\))?"), _caught_stealing),
    (re.compile(r"^(SH|SF)([0-9]*)"), _sacrifice),
    (re.compile(r"^(S)([0-9])?"), _hit),
    (re.compile(r"^(DGR)([0-9])?"), _hit),
    (re.compile(r"^(D)([0-9])?"), _hit),
    (re.compile(r"^(T)([0-9])?"), _hit),
    (re.compile(r"^(HR)([0-9])?"), _hit),
    (re.compile(r"^K"), _strikeout),
    (re.compile(r"^([GFLP])([0-9]+)"), _batted_out),
    (re.compile(r"^(W|IW|HP)$"), _exact),
    (re.compile(r"^E([0-9])"), _error),
    (re.compile(r"^FC([0-9])?"), _fielders_choice),
    (re.compile(r"^PO([123])(?:\(([1-9]+)\))?"), _pickoff),
    (re.compile(r"^POCS([23H])(?:\(([1-9]+)\))?"), _pickoff_caught_stealing),
    (re.compile(r"^(WP|PB|BK|NP)$"), _exact),
    (re.compile(r"^[0-9]+$"), _fielder_play),
)


def classify(primary: str, event: StructuredEvent) -> StructuredEvent:
    """Return ``event`` with the primary event fields filled in.

    An unrecognized token returns ``event`` unchanged (empty event type).
    """
    for pattern, handler in PRIMARY_EVENT_RULES:
        m = pattern.match(primary)
        if m:
            return handler(m, event)
    return event
