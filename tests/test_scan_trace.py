import pytest

from hull_scan.graham_scan import closed_graham_scan, open_graham_scan
from hull_scan.scan_trace import graham_scan_trace

FRAME_KEYS = {'all_points', 'hull_points', 'current_point', 'popped_point', 'status', 'final_hull_path'}


def test_empty_input_yields_a_single_final_frame():
    frames = list(graham_scan_trace([]))
    assert len(frames) == 1
    assert frames[0]['hull_points'] == []
    assert frames[0]['final_hull_path'] == []


def test_frames_for_a_clockwise_apex():
    points = [(0, 0), (5, 0), (10, -5)]
    frames = list(graham_scan_trace(points))
    assert all(set(frame) == FRAME_KEYS for frame in frames)
    assert [f['popped_point'] for f in frames if f['popped_point'] is not None] == [(5, 0)]
    # consider + push for each point, one pop, one final frame
    assert len(frames) == 2 * len(points) + 2
    assert frames[-1]['hull_points'] == [(0, 0), (10, -5)]
    assert frames[-1]['final_hull_path'] == [(0, 0), (10, -5)]
    assert frames[-1]['status'] == "Open hull complete! Found 2 points."


def test_only_the_last_frame_has_a_final_path():
    frames = list(graham_scan_trace([(0, 0), (5, 0), (10, 5)], closed=True))
    assert all(f['final_hull_path'] is None for f in frames[:-1])
    assert frames[-1]['final_hull_path'] == [(0, 0), (5, 0), (10, 5), (0, 0)]


def test_closed_trace_shows_wraparound_removals():
    points = [(0, -1), (1, 0), (1, 5), (-5, 5), (-5, 0), (-2, 1)]
    frames = list(graham_scan_trace(points, closed=True))
    wraparound = [f for f in frames if 'closing edge' in f['status']]
    assert [f['popped_point'] for f in wraparound] == [(-2, 1)]


@pytest.mark.parametrize(
    "points",
    [
        [(0, 0), (1, 0), (1, 5), (-5, -1)],
        [(0, 0), (2, 1), (5, 3), (0, 5), (-10, -10)],
        [(0, -1), (1, 0), (1, 5), (-5, 5), (-5, 0), (-2, 1)],
        [(0, 5), (0, 0), (1, 1), (2, 4), (3, 9), (4, 16), (5, 0)],
    ]
)
def test_final_frame_matches_the_scans(points):
    assert list(graham_scan_trace(points))[-1]['hull_points'] == open_graham_scan(points)
    assert list(graham_scan_trace(points, closed=True))[-1]['hull_points'] == closed_graham_scan(points)


def test_trace_is_lazy():
    trace = graham_scan_trace([(0, 0), (5, 0)])
    first = next(trace)
    assert first['current_point'] == (0, 0)
    assert first['hull_points'] == []
