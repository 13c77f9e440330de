from enum import IntEnum
from fractions import Fraction
from typing import NamedTuple


class Orientation(IntEnum):
    """
    Turn direction of an ordered triplet (p, q, r).
    Values follow the sign of the cross product (q - p) x (r - q).
    """

    RIGHT_TURN = -1  # clockwise
    COLLINEAR = 0
    LEFT_TURN = 1  # counter-clockwise


class Point(NamedTuple):
    x: object
    y: object

    @classmethod
    def parse(cls, text):
        """Builds a point from "x,y". Integers stay ints, anything else becomes a Fraction."""
        parts = text.split(',')
        if len(parts) != 2:
            raise ValueError(f"expected 'x,y', got {text!r}")
        return cls(*(_parse_coordinate(part) for part in parts))


def _parse_coordinate(token):
    token = token.strip()
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return Fraction(token)
    except (ValueError, ZeroDivisionError):
        raise ValueError(f"invalid coordinate {token!r}") from None


def _exact(value):
    # every finite float is a dyadic rational, so this conversion loses nothing
    return Fraction(value) if isinstance(value, float) else value


def orientation(p, q, r):
    """
    Exact orientation of the ordered triplet (p, q, r).
    Returns:
        Orientation.LEFT_TURN: r is to the left of the vector pq
        Orientation.RIGHT_TURN: r is to the right of the vector pq
        Orientation.COLLINEAR: collinear points, or two of them coincide

    Float coordinates are evaluated as Fractions, so no tolerance is involved.
    NaN or infinite coordinates raise, as Fraction does.
    """
    x1, y1, x2, y2, x3, y3 = (_exact(v) for v in (*p, *q, *r))
    d = (y3 - y2) * (x2 - x1) - (y2 - y1) * (x3 - x2)
    if d > 0:
        return Orientation.LEFT_TURN
    elif d < 0:
        return Orientation.RIGHT_TURN
    else:
        return Orientation.COLLINEAR


def clockwise(predicate=orientation):
    """
    Swaps left and right turns of `predicate`, so that the scans keep
    clockwise turns instead of counter-clockwise ones.
    """
    def swapped(p, q, r):
        return Orientation(-predicate(p, q, r))
    return swapped


def turn_test(predicate=orientation, accept_right=False, accept_collinear=False):
    """
    Boolean view of a three-valued predicate: the returned callable is True
    for left turns, and for right turns or collinear triplets when the
    matching flag is set.
    """
    accepted = {Orientation.LEFT_TURN}
    if accept_right:
        accepted.add(Orientation.RIGHT_TURN)
    if accept_collinear:
        accepted.add(Orientation.COLLINEAR)

    def test(p, q, r):
        return predicate(p, q, r) in accepted
    return test
