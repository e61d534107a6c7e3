import pytest
from pydantic import ValidationError

from bball_playback.events.parser import parse_event, split_event


def test_split_event():
    assert split_event("S8/G4M.3-H;2-H;1-3") == ("S8", ["G4M"], ["3-H;2-H;1-3"])
    assert split_event("K") == ("K", [], [])
    assert split_event("643/G6M/DP.1-2.2-3") == ("643", ["G6M", "DP"], ["1-2", "2-3"])


def test_full_parse():
    e = parse_event("G63/G6M.3-H;2-H;1-3")
    assert e.primary_event_type == "G"
    assert e.is_double_play is True and e.out_count == 2
    assert e.location.trajectory == "ground ball"
    assert e.location.depth == "medium"
    assert [(a.from_base, a.to_base) for a in e.base_running] == [("3", "H"), ("2", "H"), ("1", "3")]
    assert e.rbi is None


def test_advances_follow_classifier_runners():
    e = parse_event("SB2.1-3")
    assert [(a.from_base, a.to_base) for a in e.base_running] == [("1", "2"), ("1", "3")]


def test_rbi_with_advances():
    e = parse_event("S8+2.3-H;2-H;1-3")
    assert e.primary_event_type == "S"
    assert e.rbi == 2
    assert e.fielders[0].position == 8
    assert len(e.base_running) == 3


def test_raw_event_preserved():
    assert parse_event("S8/G4M.3-H;2-H;1-3").raw_event == "S8/G4M.3-H;2-H;1-3"
    assert parse_event("  ").raw_event == "  "


@pytest.mark.parametrize("code", ["", "   ", "ZZZ", "////", "....", ";;;", "+", "?"])
def test_unrecognized_codes_parse_to_empty_type(code):
    e = parse_event(code)
    assert e.primary_event_type == ""
    assert e.is_out is False
    assert e.out_count == 0


def test_empty_code_has_empty_collections():
    e = parse_event("")
    assert e.fielders == ()
    assert e.base_running == ()
    assert e.rbi is None


def test_non_string_input_is_treated_as_empty():
    e = parse_event(None)
    assert e.primary_event_type == ""
    assert e.raw_event == ""


def test_garbage_advancement_keeps_good_tokens():
    e = parse_event("S8.GARBAGE;2-H")
    assert e.primary_event_type == "S"
    assert [(a.from_base, a.to_base) for a in e.base_running] == [("2", "H")]


def test_parse_is_deterministic():
    assert parse_event("HR/F78.3-H") == parse_event("HR/F78.3-H")


def test_event_is_immutable():
    e = parse_event("S8")
    with pytest.raises(ValidationError):
        e.primary_event_type = "D"


def test_double_play_out_count_invariant():
    for code in ["643", "G63", "463/G4", "5643", "G3", "7", "31"]:
        e = parse_event(code)
        if e.is_double_play:
            assert e.out_count == 2
        elif e.is_triple_play:
            assert e.out_count == 3
        else:
            assert e.out_count == 1


def test_camel_case_json():
    body = parse_event("CS2(24)").model_dump(by_alias=True)
    assert body["primaryEventType"] == "CS"
    assert body["baseRunning"][0]["fromBase"] == "1"
    assert body["baseRunning"][0]["isOut"] is True
    assert body["rawEvent"] == "CS2(24)"


def test_modifier_fielder_without_primary_becomes_out():
    e = parse_event("/F7")
    assert e.primary_event_type == "F"
    assert [f.position for f in e.fielders] == [7]
