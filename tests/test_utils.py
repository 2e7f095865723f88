from datetime import timedelta

from tunedeck.utils import format_duration, map_join, parse_uri


def test_format_duration_pads_seconds():
    assert format_duration(125) == "2:05"


def test_format_duration_zero():
    assert format_duration(0) == "0:00"


def test_format_duration_accepts_timedelta():
    assert format_duration(timedelta(seconds=3725)) == format_duration(3725)


def test_format_duration_truncates_fraction():
    assert format_duration(59.9) == format_duration(59)


def test_map_join_matches_join():
    items = ["a", "b", "c"]
    assert map_join(items, str.upper, ", ") == ", ".join(["A", "B", "C"])


def test_map_join_empty():
    assert map_join([], str, "-") == ""


def test_map_join_skips_separator_after_empty_prefix():
    assert map_join(["", "x"], lambda s: s, ",") == "x"


def test_parse_uri_user_form():
    assert parse_uri("spotify:user:alice:playlist:abc") == "spotify:playlist:abc"


def test_parse_uri_unchanged():
    uri = "spotify:playlist:abc"
    assert parse_uri(uri) == uri