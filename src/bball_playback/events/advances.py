"""
Base-advancement parser for the "." clauses of an event code.

"S8.3-H;1-3" -> runner from third scores, runner from first to third.
A fielder group marks the runner out on the advance: "1-3(85)".
"""

from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from ..schemas import BaseRunningInfo, StructuredEvent


ADVANCE_PATTERN = re.compile(r"^([123])-([123H])(\(([1-9]+)\))?$")


def parse_advance(token: str):
    """Return a BaseRunningInfo for one advance token, or None if malformed."""
    m = ADVANCE_PATTERN.match(token.strip())
    if not m:
        return None
    fielders = m.group(4)
    return BaseRunningInfo(
        from_base=m.group(1),
        to_base=m.group(2),
        is_out=fielders is not None,
        fielders=tuple(int(d) for d in fielders) if fielders else None,
    )


def parse_advances(segments: Iterable[str]) -> Tuple[BaseRunningInfo, ...]:
    advances: List[BaseRunningInfo] = []
    for segment in segments:
        for token in segment.split(";"):
            advance = parse_advance(token)
            if advance is not None:
                advances.append(advance)
    return tuple(advances)


def apply_advances(event: StructuredEvent, segments: Iterable[str]) -> StructuredEvent:
    advances = parse_advances(segments)
    if not advances:
        return event
    return event.model_copy(update={"base_running": event.base_running + advances})
