import itertools

import pytest

from dyadic import Dyadic
from region import Region, normalize

CATALOGUE = [
    Region.empty(),
    Region.real_line(),
    Region.closed_segment(0, 1),
    Region.open_segment(0, 1),
    Region.closed_segment(1, 1),
    Region.open_left_ray(0),
    Region.closed_right_ray(1),
    Region.open_segment(0, 1) | Region.open_segment(1, 2),
    Region.closed_left_ray(-1) | Region.closed_segment(Dyadic(1, 2), 3) | Region.open_right_ray(4),
    ~Region.closed_segment(0, 0),
]

PAIRS = list(itertools.product(CATALOGUE, repeat=2))
TRIPLES = list(itertools.product(CATALOGUE[2:8], repeat=3))


@pytest.mark.parametrize("r", CATALOGUE, ids=str)
class TestUnaryLaws:
    def test_normalize_idempotent(self, r: Region) -> None:
        assert tuple(normalize(r.segments)) == r.segments

    def test_union_identities(self, r: Region) -> None:
        assert r | r == r
        assert r | Region.empty() == r
        assert r | Region.real_line() == Region.real_line()

    def test_intersection_identities(self, r: Region) -> None:
        assert r & Region.real_line() == r
        assert r & Region.empty() == Region.empty()
        assert r & r == r

    def test_containment_bounds(self, r: Region) -> None:
        assert r <= r
        assert Region.empty() <= r
        assert r <= Region.real_line()

    def test_complement_involution(self, r: Region) -> None:
        assert ~~r == r
        assert (r & ~r).is_empty()
        assert r | ~r == Region.real_line()

    def test_closure_contains_region(self, r: Region) -> None:
        assert r <= r.closure()
        assert r.closure().closure() == r.closure()


@pytest.mark.parametrize("a, b", PAIRS)
class TestBinaryLaws:
    def test_commutative(self, a: Region, b: Region) -> None:
        assert a | b == b | a
        assert a & b == b & a

    def test_de_morgan(self, a: Region, b: Region) -> None:
        assert ~(a | b) == ~a & ~b
        assert ~(a & b) == ~a | ~b

    def test_containment_matches_algebra(self, a: Region, b: Region) -> None:
        assert (a <= b) == (a & b == a)
        assert (a <= b) == (a | b == b)
        assert a <= a | b
        assert a & b <= a

    def test_difference(self, a: Region, b: Region) -> None:
        assert (a - b) & b == Region.empty()
        assert (a - b) | (a & b) == a


@pytest.mark.parametrize("a, b, c", TRIPLES)
def test_associative_and_transitive(a: Region, b: Region, c: Region) -> None:
    assert (a | b) | c == a | (b | c)
    assert (a & b) & c == a & (b & c)
    if a <= b and b <= c:
        assert a <= c
