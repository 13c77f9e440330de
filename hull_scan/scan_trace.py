from collections import deque

from hull_scan.orientation import orientation, turn_test


def _frame(all_points, hull, current=None, popped=None, status="", final_hull_path=None):
    return {
        'all_points': all_points,
        'hull_points': list(hull),
        'current_point': current,
        'popped_point': popped,
        'status': status,
        'final_hull_path': final_hull_path,
    }


def graham_scan_trace(points, predicate=orientation, closed=False):
    """
    Runs the open (or closed) Graham scan over `points` and yields states for animation.
    The last frame holds the same hull as open_graham_scan / closed_graham_scan.
    """
    points = list(points)
    keep = turn_test(predicate)
    hull = deque()

    for p in points:
        yield _frame(points, hull, current=p, status=f"Considering {p}")
        while len(hull) >= 2 and not keep(hull[-2], hull[-1], p):
            popped = hull.pop()
            # before_last, last, p is clockwise or collinear
            yield _frame(points, hull, current=p, popped=popped,
                         status=f"{popped} removed: no left turn towards {p}")
        hull.append(p)
        yield _frame(points, hull, current=p, status=f"{p} pushed ({len(hull)} on the stack)")

    if closed:
        while len(hull) > 2:
            if not keep(hull[-2], hull[-1], hull[0]):
                popped = hull.pop()
                yield _frame(points, hull, current=hull[0], popped=popped,
                             status=f"{popped} removed: closing edge back to {hull[0]}")
            elif not keep(hull[-1], hull[0], hull[1]):
                popped = hull.popleft()
                yield _frame(points, hull, current=hull[-1], popped=popped,
                             status=f"{popped} removed: closing edge from {hull[-1]}")
            else:
                break

    final_hull_path = list(hull)
    if closed and len(hull) > 1:
        final_hull_path.append(hull[0])  # close the polygon for drawing
    kind = "Closed" if closed else "Open"
    yield _frame(points, hull, status=f"{kind} hull complete! Found {len(hull)} points.",
                 final_hull_path=final_hull_path)
