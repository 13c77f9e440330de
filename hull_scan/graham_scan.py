import logging
from collections import deque

from hull_scan.orientation import orientation, turn_test

logger = logging.getLogger(__name__)

# The points must already be ordered the way the hull is walked (e.g. by polar
# angle around a pivot, or lexicographically for one monotone chain). Unsorted
# input still gives a convex chain, just not necessarily the hull. The same
# goes for an inexact predicate: no result is re-validated.


def update_hull(stack, point, keep):
    """
    Pops the top of `stack` while (before_last, last, point) fails `keep`,
    then pushes `point`. `stack` needs append/pop and negative indexing.
    """
    while len(stack) >= 2 and not keep(stack[-2], stack[-1], point):
        stack.pop()
    stack.append(point)


def build_hull(stack, points, keep):
    for point in points:
        update_hull(stack, point, keep)
    return stack


def open_graham_scan(points, predicate=orientation):
    """
    Returns the convex chain left by a single stack pass over `points`.
    Every three consecutive output points make a left turn under `predicate`;
    right turns and collinear triplets are pruned.
    """
    hull = build_hull([], points, turn_test(predicate))
    logger.debug("open scan kept %d points", len(hull))
    return hull


def closed_graham_scan(points, predicate=orientation):
    """
    Like open_graham_scan, but the result is read as a closed polygon: the
    edge from the last point back to the first must be convex as well.

    After the linear pass the two boundary triplets are repaired:
    (hull[-2], hull[-1], hull[0]) by popping the last point and
    (hull[-1], hull[0], hull[1]) by popping the first one, until both are
    left turns or only two points remain.
    """
    keep = turn_test(predicate)
    hull = build_hull(deque(), points, keep)

    popped_back = popped_front = 0
    while len(hull) > 2:
        if not keep(hull[-2], hull[-1], hull[0]):
            hull.pop()
            popped_back += 1
        elif not keep(hull[-1], hull[0], hull[1]):
            hull.popleft()
            popped_front += 1
        else:
            break

    logger.debug("closed scan kept %d points (wraparound removed %d last, %d first)",
                 len(hull), popped_back, popped_front)
    return list(hull)


def is_convex(chain, predicate=orientation, closed=False):
    """True when every consecutive triplet of `chain` (cyclically if `closed`) is a left turn."""
    chain = list(chain)
    n = len(chain)
    if n < 3:
        return True
    keep = turn_test(predicate)
    last = n if closed else n - 2
    return all(keep(chain[i], chain[(i + 1) % n], chain[(i + 2) % n]) for i in range(last))
