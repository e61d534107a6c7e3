"""
Event translation facade.

Translates Retrosheet event codes (https://www.retrosheet.org/eventfile.htm)
into play descriptions:

    >>> translate_event("G63/G6M.3-H;2-H;1-3")
    'Grounded into a 6-3 double play'

``parse_event`` and ``render`` are re-exported for callers that need the
structured form as well as the text.
"""

from __future__ import annotations

from .parser import parse_event
from .translator import render

__all__ = ["translate_event", "parse_event", "render"]


def translate_event(code: str) -> str:
    return render(parse_event(code))
