"""
Narrate a frame of Retrosheet events, one description per play.
"""

from __future__ import annotations

import pandas as pd

from ..events.translate import parse_event, render
from ..events.translator import UNKNOWN_PLAY
from .retrosheet_schema import EVENT_TEXT_COL, NARRATION_COLS


def _event_code(val) -> str:
    if pd.isna(val):
        return ""
    return str(val).strip()


def narrate_events(df: pd.DataFrame, unknown_text: str = UNKNOWN_PLAY) -> pd.DataFrame:
    """Return a copy of ``df`` with description, event_type and outs_on_play columns.

    Raises KeyError if the frame has no ``event_tx`` column. Missing event
    text is narrated as an empty code.
    """
    if EVENT_TEXT_COL not in df.columns:
        raise KeyError(f"missing required column {EVENT_TEXT_COL!r}")

    events = [parse_event(_event_code(v)) for v in df[EVENT_TEXT_COL]]
    out = df.copy()
    out["description"] = [render(e, unknown_text=unknown_text) for e in events]
    out["event_type"] = [e.primary_event_type for e in events]
    out["outs_on_play"] = [e.out_count for e in events]
    return out.astype(NARRATION_COLS)
