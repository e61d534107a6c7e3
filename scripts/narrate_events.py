"""
Narrate Retrosheet event codes.

Either translate codes given on the command line:

    python scripts/narrate_events.py S8 "G63/G6M.3-H;2-H" HR7+4

or narrate a processed event CSV (column ``event_tx`` required) and write it
back out with description, event_type and outs_on_play columns:

    python scripts/narrate_events.py --csv data/processed/retrosheet_events.csv \
        --out data/processed/retrosheet_narrated.csv
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pandas as pd

ROOT = Path(__file__).resolve().parents[1]
# Ensure 'src' is importable when running as a script
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from bball_playback.data.narrate import narrate_events
from bball_playback.data.retrosheet_schema import CANON_COLS, EVENT_TEXT_COL
from bball_playback.events.translate import translate_event
from bball_playback.logging_utils import get_logger

logger = get_logger("narrate_events")


def main() -> int:
    ap = argparse.ArgumentParser(description="Translate Retrosheet event codes into play descriptions")
    ap.add_argument("codes", nargs="*", help="Event codes to translate")
    ap.add_argument("--csv", default=None, help="Event CSV with an event_tx column")
    ap.add_argument("--out", default=None, help="Output CSV (default: print to stdout)")
    args = ap.parse_args()

    if not args.csv and not args.codes:
        ap.error("give event codes or --csv")

    for code in args.codes:
        print(f"{code}\t{translate_event(code)}")

    if args.csv:
        src = Path(args.csv)
        if not src.exists():
            logger.error("Input file not found: %s", src)
            return 1
        df = pd.read_csv(src, dtype={EVENT_TEXT_COL: "string"})
        try:
            df = df.astype({c: t for c, t in CANON_COLS.items() if c in df.columns})
            narrated = narrate_events(df)
        except (KeyError, ValueError, TypeError) as exc:
            logger.error("%s: %s", src, exc)
            return 1
        unknown = int((narrated["event_type"] == "").sum())
        if unknown:
            logger.info("%d of %d events were not recognized", unknown, len(narrated))
        if args.out:
            out = Path(args.out)
            out.parent.mkdir(parents=True, exist_ok=True)
            narrated.to_csv(out, index=False)
            logger.info("Wrote %s with %d rows", out, len(narrated))
        else:
            narrated.to_csv(sys.stdout, index=False)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
