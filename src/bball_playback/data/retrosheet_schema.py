"""
Retrosheet event columns used when narrating a game log.

Only ``event_tx`` is required by the narrator; the other columns are carried
through untouched when present. Types are informative.
"""

from __future__ import annotations

from typing import Dict


EVENT_TEXT_COL = "event_tx"

CANON_COLS: Dict[str, str] = {
    # identifiers
    "game_id": "string",
    "inning": "Int64",
    "half": "string",  # 'T'/'B'
    "event_num": "Int64",

    # actors
    "batter_retro_id": "string",
    "pitcher_retro_id": "string",

    # event info
    "event_tx": "string",
    "rbi": "Int64",
    "outs_before": "Int64",
}

# columns added by narrate_events
NARRATION_COLS: Dict[str, str] = {
    "description": "string",
    "event_type": "string",
    "outs_on_play": "Int64",
}
