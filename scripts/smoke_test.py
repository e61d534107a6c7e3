from __future__ import annotations

import json
from fastapi.testclient import TestClient
import os, sys

# Ensure 'src' is importable regardless of CWD
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from bball_playback.serve.api import app

# (code, expected description)
EXAMPLES = [
    ("S7/L7", "Single to left field"),
    ("D8/F8", "Double to center field"),
    ("T9/L9", "Triple to right field"),
    ("HR/F78", "Home run to left-center field"),
    ("K", "Struck out"),
    ("W", "Walk"),
    ("IW", "Intentional walk"),
    ("HP", "Hit by pitch"),
    ("E6/G6", "Error by shortstop"),
    ("FC5/G5", "Reached on a fielder's choice to third baseman"),
    ("G63/G6M", "Grounded into a 6-3 double play"),
    ("F8/F8D", "Flyout to center fielder"),
    ("L4/L4M", "Lineout to second baseman"),
    ("P5/P5F", "Popup to third baseman"),
    ("SB2", "Stole second base"),
    ("CS2", "Caught stealing second base"),
    ("PO1", "Picked off first base"),
    ("POCS2", "Picked off and caught stealing second base"),
    ("WP", "Wild pitch"),
    ("PB", "Passed ball"),
    ("BK", "Balk"),
    ("NP", "No play"),
    ("S9/L9S.2-H;1-3", "Single to right field"),
    ("HR/F7LD.3-H;2-H;1-H", "Home run to left field"),
    ("643/G6M.3-H;1-2", "Grounded into a 6-4-3 double play"),
    ("S8+2.3-H;2-H;1-3", "Single to center field, 2 RBI"),
]


def main() -> int:
    client = TestClient(app)

    # Health
    r = client.get("/health")
    print("/health:", r.status_code, r.json())

    codes = [code for code, _ in EXAMPLES]
    r2 = client.post("/v1/events/translate-batch", json={"events": codes})
    print("/v1/events/translate-batch:", r2.status_code)
    failed = 0
    for (code, expected), result in zip(EXAMPLES, r2.json()["results"]):
        ok = result["description"] == expected
        failed += not ok
        print(f"  {'PASS' if ok else 'FAIL'}  {code:<24} {result['description']}")
    print(f"{len(EXAMPLES) - failed}/{len(EXAMPLES)} translations as expected")

    # Structured form of one play
    r3 = client.post("/v1/events/parse", json={"event": "G63/G6M.3-H;2-H;1-3"})
    print("/v1/events/parse:", r3.status_code)
    print(json.dumps(r3.json(), indent=2))

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
