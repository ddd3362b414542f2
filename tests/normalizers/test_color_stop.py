import pytest

from css3images.normalizers.color_stop_normalizer import (
    ColorStop,
    coerce_stop_sequence,
    normalize_color_stops,
)


def test_three_stops_pair_adjacent_colors():
    stops = [("#000", 0), ("#fff", 17), ("#ccc", 18)]
    assert normalize_color_stops(stops) == [
        ColorStop("#000", "#fff", 17),
        ColorStop("#fff", "#ccc", 18),
    ]


@pytest.mark.parametrize("count", [0, 1, 2, 3, 5, 10])
def test_segment_count_is_one_less_than_stop_count(count):
    stops = [(f"#{i:03d}", i * 4) for i in range(count)]
    assert len(normalize_color_stops(stops)) == max(0, count - 1)


def test_height_is_later_offset_not_difference():
    """Heights are carried over verbatim from the later stop."""
    segments = normalize_color_stops([("red", 10), ("green", 30), ("blue", 35)])
    assert [s.height for s in segments] == [30, 35]


@pytest.mark.parametrize("stops", [None, [], [("#000", 0)]])
def test_too_few_stops_yield_no_segments(stops):
    assert normalize_color_stops(stops) == []


def test_none_is_treated_as_empty():
    assert coerce_stop_sequence(None) == []


def test_iterables_are_materialized():
    stops = (stop for stop in [("#000", 0), ("#fff", 17)])
    assert normalize_color_stops(stops) == [("#000", "#fff", 17)]


def test_normalizing_is_idempotent_and_leaves_input_alone():
    stops = [["#000", 0], ["#fff", 17], ["#ccc", 18]]
    original = [list(stop) for stop in stops]
    first = normalize_color_stops(stops)
    second = normalize_color_stops(stops)
    assert first == second
    assert stops == original


def test_duplicate_colors_produce_flat_segment():
    assert normalize_color_stops([("#abc", 0), ("#abc", 5)]) == [("#abc", "#abc", 5)]


def test_colors_are_passed_through_untouched():
    stops = [("rgb(242,242,242)", 0), ("not a color", 3)]
    segment, = normalize_color_stops(stops)
    assert segment.from_color == "rgb(242,242,242)"
    assert segment.to_color == "not a color"


def test_from_stops_matches_module_function():
    stops = [("#000", 0), ("#fff", 17)]
    assert ColorStop.from_stops(stops) == normalize_color_stops(stops)


def test_fill_delegates_to_backend(recording_backend):
    stop = ColorStop("#000", "#fff", 17)
    assert stop.fill(recording_backend, 4) == ("rect", 4, 17, "#000", "#fff")
