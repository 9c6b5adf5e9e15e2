"""Midpoints and splitting of segments, for search procedures that bisect regions."""
from __future__ import annotations
from typing import Optional, Tuple
import logging

from dyadic import Dyadic, ZERO, ONE, NEGATIVE_ONE, UP, DOWN
from endpoint import Endpoint, NEG_INF, POS_INF, is_interval
from region import Segment

logger = logging.getLogger(__name__)


def midpoint(s: Segment) -> Dyadic:
    """A finite dyadic point inside the segment.

    Bounded segments give the exact average of their boundaries. A ray gets a
    proxy obtained by doubling its finite boundary away from zero, or +/-1 when
    that boundary lies within [-1, 1]; the whole line gives 0.
    """
    a, b = s.left, s.right
    if a.kind == POS_INF or b.kind == NEG_INF or not is_interval(a, b):
        raise ValueError(f"midpoint: {a!r}, {b!r} is not a segment")
    if a.kind == NEG_INF and b.kind == POS_INF:
        return ZERO
    if b.kind == POS_INF:
        q = a.value
        if q < ONE:
            return ONE
        return q.double(round=UP)
    if a.kind == NEG_INF:
        q = b.value
        if q > NEGATIVE_ONE:
            return NEGATIVE_ONE
        return q.double(round=DOWN)
    return a.value.average(b.value)


def split(s: Segment, at: Optional[Dyadic | int | float] = None) -> Tuple[Segment, Segment]:
    """Split a segment into two halves sharing the closed point `at` (default: midpoint)."""
    if at is None:
        m = midpoint(s)
    else:
        if not is_interval(s.left, s.right):
            raise ValueError(f"split: {s.left!r}, {s.right!r} is not a segment")
        m = Dyadic.of(at)
    if not m.is_finite():
        raise ValueError(f"split: cannot split at {m}")
    p = Endpoint.closed(m)
    if not (is_interval(s.left, p) and is_interval(p, s.right)):
        raise ValueError(f"split: {m} does not lie in {s}")
    logger.debug("splitting %s at %s", s, m)
    return Segment(s.left, p), Segment(p, s.right)
