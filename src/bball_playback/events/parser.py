"""
Event assembler: raw Retrosheet event code -> StructuredEvent.

    <primary>[/<modifier>...][.<advance>[;<advance>...]]

The code is read in one pass, each stage returning a new immutable event:
classify the primary token, fold in the modifiers, append the base
advancements, then pick up the RBI count.
"""

from __future__ import annotations

from ..schemas import StructuredEvent
from .advances import apply_advances
from .classifier import classify
from .modifiers import apply_modifiers
from .rbi import apply_rbi


def split_event(code: str):
    """Split a code into ``(primary, modifiers, advancement_segments)``."""
    main, *advance_parts = code.split(".")
    primary, *modifiers = main.strip().split("/")
    return (
        primary.strip(),
        [m.strip() for m in modifiers],
        [p.strip() for p in advance_parts],
    )


def parse_event(code: str) -> StructuredEvent:
    """Parse ``code`` into a StructuredEvent.

    Never raises: an empty or unrecognized code yields an event with an empty
    ``primary_event_type``, and malformed advancement tokens are skipped.
    """
    raw = code if isinstance(code, str) else ""
    event = StructuredEvent(raw_event=raw)
    if not raw.strip():
        return event

    primary, modifiers, advances = split_event(raw)
    event = classify(primary, event)
    event = apply_modifiers(event, modifiers, primary)
    event = apply_advances(event, advances)
    event = apply_rbi(event, primary)
    return event
