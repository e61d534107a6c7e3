import pytest

from bball_playback.events.translate import parse_event, render, translate_event


@pytest.mark.parametrize("code,expected", [
    # hits
    ("S8/G4M", "Single to center field"),
    ("S7/G56", "Single to the left side of the infield"),
    ("D7/L7LD", "Double to left field"),
    ("T9/F9", "Triple to right field"),
    ("HR/F7LD", "Home run to left field"),
    ("HR/F78", "Home run to left-center field"),
    ("DGR/L9L", "Ground rule double to right field"),
    ("HR.1-H;2-H;3-H", "Home run"),
    # outs
    ("K", "Struck out"),
    ("7", "Flyout to left fielder"),
    ("3", "Groundout to first baseman"),
    ("5/L5", "Lineout to third baseman"),
    ("6/P6S", "Popup to shortstop"),
    ("F8", "Flyout to center fielder"),
    ("31/G3.2-3", "Groundout to first baseman, throw to pitcher"),
    ("G53", "Grounded into a 5-3 double play"),
    ("643", "Grounded into a 6-4-3 double play"),
    ("5643", "Grounded into a 5-6-4-3 triple play"),
    # sacrifices
    ("SF/F9", "Sacrifice fly to right fielder"),
    ("SF7", "Sacrifice fly to left fielder"),
    ("SH/BG", "Sacrifice bunt"),
    ("SH13", "Sacrifice bunt, pitcher to first baseman"),
    # batter reaches
    ("W", "Walk"),
    ("IW", "Intentional walk"),
    ("HP", "Hit by pitch"),
    ("E6/G6", "Error by shortstop"),
    ("FC5/G5", "Reached on a fielder's choice to third baseman"),
    # base running
    ("SB2", "Stole second base"),
    ("SBH", "Stole home"),
    ("CSH", "Caught stealing home"),
    ("CS2(26)", "Caught stealing second base"),
    ("PO1", "Picked off first base"),
    ("POCS2(1361)", "Picked off and caught stealing second base"),
    # misc
    ("WP", "Wild pitch"),
    ("PB", "Passed ball"),
    ("BK", "Balk"),
    ("NP", "No play"),
    # rbi
    ("S8+2.3-H;2-H;1-3", "Single to center field, 2 RBI"),
    ("HR7+4", "Home run to left field, 4 RBI"),
])
def test_translate_event(code, expected):
    assert translate_event(code) == expected


@pytest.mark.parametrize("code", ["", "XYZ", "W+WP", "....", "/", "PO4"])
def test_unrecognized_codes_read_unknown_play(code):
    assert translate_event(code) == "Unknown play"


def test_never_raises_on_non_string():
    assert translate_event(None) == "Unknown play"
    assert translate_event(42) == "Unknown play"


def test_translate_is_render_of_parse():
    for code in ["S8/G4M.3-H;2-H;1-3", "G63", "E6", "ZZZ"]:
        assert translate_event(code) == render(parse_event(code))


def test_deterministic():
    code = "HR/F78+3.2-H;1-H"
    assert len({translate_event(code) for _ in range(5)}) == 1


def test_prefix_precedence():
    # steals and sacrifices are not read as singles or flyouts
    assert parse_event("SB2").primary_event_type == "SB"
    assert parse_event("SH13").primary_event_type == "SH"
    assert parse_event("SF7").primary_event_type == "SF"
    assert parse_event("DGR").primary_event_type == "DGR"


def test_overlong_rbi_run_still_translates():
    assert translate_event("S8+" + "1" * 5000) == "Single to center field"


@pytest.mark.parametrize("code", ["٣", "E٣", "٦٤٣", "G٦٣"])
def test_non_ascii_digits_are_unrecognized(code):
    assert translate_event(code) == "Unknown play"


def test_mixed_steal_and_caught_stealing():
    e = parse_event("SB2;CS3(25)")
    assert e.primary_event_type == "SB"
    assert [(r.from_base, r.to_base, r.is_out) for r in e.base_running] == [
        ("1", "2", False), ("2", "3", True),
    ]
    assert e.base_running[1].fielders == (2, 5)
    assert e.is_out is True and e.out_count == 1
    assert translate_event("SB2;CS3(25)") == "Stole second base"
