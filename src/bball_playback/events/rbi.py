from __future__ import annotations

import re
from typing import Optional

from ..schemas import StructuredEvent


# longer runs are not an RBI count
RBI_PATTERN = re.compile(r"\+([0-9]{1,2})(?![0-9])")


def extract_rbi(primary: str) -> Optional[int]:
    """Runs batted in encoded as a "+N" suffix on the primary token, if any."""
    m = RBI_PATTERN.search(primary)
    return int(m.group(1)) if m else None


def apply_rbi(event: StructuredEvent, primary: str) -> StructuredEvent:
    rbi = extract_rbi(primary)
    if rbi is None:
        return event
    return event.model_copy(update={"rbi": rbi})
