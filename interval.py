from __future__ import annotations
from typing import Union

from dyadic import Dyadic, NEGATIVE_INFINITY, POSITIVE_INFINITY

Number = Union[Dyadic, int, float]


class Interval:
    """Closed interval [a, b] with dyadic bounds; the bounds may be infinite."""

    a: Dyadic
    b: Dyadic

    @staticmethod
    def make(l: Number, r: Number):
        return Interval(l, r)

    @staticmethod
    def point(p: Number):
        return Interval(p, p)

    @staticmethod
    def reals():
        return Interval(NEGATIVE_INFINITY, POSITIVE_INFINITY)

    def __init__(self, l: Number, r: Number):
        l, r = Dyadic.of(l), Dyadic.of(r)
        if l.is_nan() or r.is_nan():
            raise ValueError("Interval bounds must not be NaN")
        if l > r:
            raise ValueError(f"Interval lower bound {l} exceeds upper bound {r}")
        self.a = l
        self.b = r

    def lower(self) -> Dyadic:
        return self.a

    def upper(self) -> Dyadic:
        return self.b

    def width(self) -> Dyadic:
        return self.b - self.a

    def contains(self, x: Number) -> bool:
        x = Dyadic.of(x)
        if x.is_nan():
            return False
        return self.a <= x <= self.b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.a, self.b))

    def __repr__(self):
        return f"Interval({self.a}, {self.b})"

    def __str__(self):
        s = "["

        if self.a == NEGATIVE_INFINITY:
            s += "-∞"
        else:
            s += str(self.a)
        s += ", "
        if self.b == POSITIVE_INFINITY:
            s += "∞"
        else:
            s += str(self.b)

        s += "]"

        return s
