"""
Regions of the extended real line.

A region is a finite union of segments whose boundaries are exact dyadic
numbers. Regions are immutable and always kept in canonical form: segments
sorted left to right, pairwise disjoint, and no two neighbours touching.
Together with union, intersection and complement they form a Boolean
algebra.
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union
import logging

import numpy as np

from dyadic import Dyadic, NEGATIVE_INFINITY as D_NEG_INF, POSITIVE_INFINITY as D_POS_INF
from endpoint import (
    Endpoint,
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    NEG_INF,
    POS_INF,
    CLOSED,
    closed_of_dyadic,
    closure_of,
    dyadic_of_endpoint,
    cmp_right,
    invert_closure,
    is_interval,
    leq_left,
    lt_left,
    lt_right,
    max_left,
    max_right,
    min_left,
    min_right,
    string_of_left,
    string_of_right,
    touch,
)
from interval import Interval

logger = logging.getLogger(__name__)

NumberLike = Union[Dyadic, int, float]

EMPTY_SET_TOKEN = "{}"
SEGMENT_SEPARATOR = ", "


class RegionNotClosedError(ValueError):
    """Raised when a region cannot be expressed as closed intervals."""

    def __init__(self, region: "Region") -> None:
        self.region = region
        super().__init__(f"Region {region} is not closed")


@dataclass(frozen=True)
class Segment:
    left: Endpoint
    right: Endpoint

    def is_interval(self) -> bool:
        return is_interval(self.left, self.right)

    def __str__(self) -> str:
        return string_of_left(self.left) + "," + string_of_right(self.right)


def _overlap(s: Segment, t: Segment) -> bool:
    return is_interval(max_left(s.left, t.left), min_right(s.right, t.right))


def normalize(segments: Iterable[Segment]) -> List[Segment]:
    """Merge neighbours of a sorted segment sequence whose boundaries touch."""
    out: List[Segment] = []
    for s in segments:
        if out and touch(out[-1].right, s.left):
            logger.debug("merging touching segments %s and %s", out[-1], s)
            out[-1] = Segment(out[-1].left, s.right)
        else:
            out.append(s)
    return out


def interval_of_segment(s: Segment) -> Interval:
    return Interval.make(dyadic_of_endpoint(s.left), dyadic_of_endpoint(s.right))


class Region:
    """A canonical region.

    The constructor trusts its segments to be sorted, disjoint and free of
    touching neighbours; equality and hashing rely on that. Use
    `from_segments` or the builders for anything else.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Sequence[Segment] = ()) -> None:
        self._segments: Tuple[Segment, ...] = tuple(segments)

    # ---- construction ----

    @staticmethod
    def empty() -> "Region":
        return Region()

    @staticmethod
    def real_line() -> "Region":
        return Region([Segment(NEGATIVE_INFINITY, POSITIVE_INFINITY)])

    @staticmethod
    def open_segment(a: NumberLike, b: NumberLike) -> "Region":
        return Region._single(Endpoint.open(a), Endpoint.open(b))

    @staticmethod
    def closed_segment(a: NumberLike, b: NumberLike) -> "Region":
        return Region._single(Endpoint.closed(a), Endpoint.closed(b))

    @staticmethod
    def open_left_ray(a: NumberLike) -> "Region":
        return Region._single(NEGATIVE_INFINITY, Endpoint.open(a))

    @staticmethod
    def open_right_ray(a: NumberLike) -> "Region":
        return Region._single(Endpoint.open(a), POSITIVE_INFINITY)

    @staticmethod
    def closed_left_ray(a: NumberLike) -> "Region":
        return Region._single(NEGATIVE_INFINITY, Endpoint.closed(a))

    @staticmethod
    def closed_right_ray(a: NumberLike) -> "Region":
        return Region._single(Endpoint.closed(a), POSITIVE_INFINITY)

    @staticmethod
    def of_interval(i: Interval) -> "Region":
        a, b = i.lower(), i.upper()
        if a.is_nan() or b.is_nan() or a > b:
            raise ValueError(f"Region.of_interval: invalid bounds {a}, {b}")
        return Region._single(closed_of_dyadic(a), closed_of_dyadic(b))

    @staticmethod
    def from_segments(segments: Iterable[Segment]) -> "Region":
        """Build a region from sorted, disjoint, well-formed segments."""
        segs = list(segments)
        for s in segs:
            if not s.is_interval():
                raise ValueError(f"Segment {s.left!r}, {s.right!r} is not an interval")
        for s, t in zip(segs, segs[1:]):
            if _overlap(s, t) or not lt_left(s.left, t.left):
                raise ValueError(f"Segments {s} and {t} are not sorted and disjoint")
        return Region(normalize(segs))

    @staticmethod
    def _single(a: Endpoint, b: Endpoint) -> "Region":
        if not is_interval(a, b):
            raise ValueError(f"{a!r}, {b!r} does not bound an interval")
        return Region([Segment(a, b)])

    # ---- access ----

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self._segments

    def __iter__(self):
        return iter(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    # ---- containment ----

    def subseteq(self, other: "Region") -> bool:
        pending = deque(self._segments)
        cover = other._segments
        j = 0
        while pending:
            if j >= len(cover):
                return False
            s, c = pending[0], cover[j]
            if not _overlap(s, c):
                if lt_right(c.right, s.right):
                    j += 1
                    continue
                return False
            if not leq_left(c.left, s.left):
                return False
            k = cmp_right(s.right, c.right)
            if k <= 0:
                pending.popleft()
                if k == 0:
                    j += 1
            else:
                # the part of s beyond c still has to be covered
                pending[0] = Segment(invert_closure(c.right), s.right)
                j += 1
        return True

    def is_empty(self) -> bool:
        return self.subseteq(EMPTY)

    def is_inhabited(self) -> bool:
        return not self.is_empty()

    def __le__(self, other: "Region") -> bool:
        return self.subseteq(other)

    def __ge__(self, other: "Region") -> bool:
        return other.subseteq(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        if self._segments == other._segments:
            return True
        return self.subseteq(other) and other.subseteq(self)

    def __hash__(self) -> int:
        return hash(self._segments)

    def __bool__(self) -> bool:
        return self.is_inhabited()

    def contains(self, x: NumberLike) -> bool:
        x = Dyadic.of(x)
        if x.is_nan():
            return False
        p = closed_of_dyadic(x)
        if not p.is_finite():
            return False
        return Region([Segment(p, p)]).subseteq(self)

    def __contains__(self, x: NumberLike) -> bool:
        return self.contains(x)

    def mask(self, points) -> np.ndarray:
        """Membership of every float in `points`, as a boolean array."""
        arr = np.asarray(points, dtype=float)
        flat = np.fromiter(
            (self.contains(Dyadic.from_float(float(p))) for p in arr.ravel()),
            dtype=bool,
            count=arr.size,
        )
        return flat.reshape(arr.shape)

    # ---- algebra ----

    def union(self, other: "Region") -> "Region":
        xs, ys = deque(self._segments), deque(other._segments)
        out: List[Segment] = []
        while xs and ys:
            i, j = xs[0], ys[0]
            if touch(i.right, j.left):
                ys[0] = Segment(i.left, j.right)
                xs.popleft()
            elif touch(j.right, i.left):
                xs[0] = Segment(j.left, i.right)
                ys.popleft()
            elif _overlap(i, j):
                k = Segment(min_left(i.left, j.left), max_right(i.right, j.right))
                # k replaces the segment reaching further right
                if lt_right(i.right, j.right):
                    xs.popleft()
                    ys[0] = k
                else:
                    ys.popleft()
                    xs[0] = k
            elif lt_left(i.left, j.left):
                out.append(xs.popleft())
            else:
                out.append(ys.popleft())
        out.extend(xs)
        out.extend(ys)
        return Region(out)

    def intersection(self, other: "Region") -> "Region":
        xs, ys = self._segments, other._segments
        i = j = 0
        out: List[Segment] = []
        while i < len(xs) and j < len(ys):
            s, t = xs[i], ys[j]
            kl = max_left(s.left, t.left)
            ku = min_right(s.right, t.right)
            if is_interval(kl, ku):
                out.append(Segment(kl, ku))
            c = cmp_right(s.right, t.right)
            if c <= 0:
                i += 1
            if c >= 0:
                j += 1
        return Region(out)

    def complement(self) -> "Region":
        out: List[Segment] = []
        a = NEGATIVE_INFINITY
        for s in normalize(self._segments):
            if s.left.kind == NEG_INF:
                if s.right.kind == POS_INF:
                    return EMPTY
                a = invert_closure(s.right)
                continue
            out.append(Segment(a, invert_closure(s.left)))
            if s.right.kind == POS_INF:
                return Region(out)
            a = invert_closure(s.right)
        out.append(Segment(a, POSITIVE_INFINITY))
        return Region(out)

    def difference(self, other: "Region") -> "Region":
        return self.intersection(other.complement())

    def closure(self) -> "Region":
        out: List[Segment] = []
        for s in self._segments:
            c = Segment(closure_of(s.left), closure_of(s.right))
            # (0,1) and (1,2) close to [0,1] and [1,2], which share a point
            if out and out[-1].right.kind == CLOSED and out[-1].right == c.left:
                out[-1] = Segment(out[-1].left, c.right)
            else:
                out.append(c)
        return Region(out)

    __or__ = union
    __and__ = intersection
    __sub__ = difference

    def __invert__(self) -> "Region":
        return self.complement()

    # ---- conversion and queries ----

    def to_closed_intervals(self) -> List[Interval]:
        out: List[Interval] = []
        for s in self._segments:
            a, b = s.left, s.right
            if a.kind == NEG_INF and b.kind == CLOSED:
                out.append(Interval.make(D_NEG_INF, b.value))
            elif a.kind == CLOSED and b.kind == POS_INF:
                out.append(Interval.make(a.value, D_POS_INF))
            elif a.kind == CLOSED and b.kind == CLOSED:
                out.append(Interval.make(a.value, b.value))
            else:
                logger.debug("segment %s of %s is not closed", s, self)
                raise RegionNotClosedError(self)
        return out

    def infimum(self) -> Dyadic:
        if not self._segments:
            return D_POS_INF
        left = self._segments[0].left
        if left.kind == POS_INF:
            raise AssertionError("PositiveInfinity is never a left bound")
        return dyadic_of_endpoint(left)

    def supremum(self) -> Dyadic:
        if not self._segments:
            return D_NEG_INF
        right = self._segments[-1].right
        if right.kind == NEG_INF:
            raise AssertionError("NegativeInfinity is never a right bound")
        return dyadic_of_endpoint(right)

    def to_string(self) -> str:
        if not self._segments:
            return EMPTY_SET_TOKEN
        return SEGMENT_SEPARATOR.join(str(s) for s in self._segments)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Region({self.to_string()})"


EMPTY = Region()
