import pytest

from bisection import midpoint, split
from dyadic import Dyadic
from endpoint import NEGATIVE_INFINITY, POSITIVE_INFINITY, Endpoint
from region import Region, Segment

o = Endpoint.open
c = Endpoint.closed


class TestMidpoint:
    def test_bounded_segment_is_exact_average(self) -> None:
        assert midpoint(Segment(c(1), c(3))) == Dyadic(2)
        assert midpoint(Segment(o(0), o(1))) == Dyadic(1, 2)
        assert midpoint(Segment(c(5), c(5))) == Dyadic(5)

    def test_right_ray_doubles_away_from_zero(self) -> None:
        assert midpoint(Region.open_right_ray(1).segments[0]) == Dyadic(2)
        assert midpoint(Segment(c(3), POSITIVE_INFINITY)) == Dyadic(6)
        assert midpoint(Segment(c(Dyadic(1, 2)), POSITIVE_INFINITY)) == Dyadic(1)
        assert midpoint(Segment(c(-7), POSITIVE_INFINITY)) == Dyadic(1)

    def test_left_ray_doubles_away_from_zero(self) -> None:
        assert midpoint(Segment(NEGATIVE_INFINITY, c(-3))) == Dyadic(-6)
        assert midpoint(Segment(NEGATIVE_INFINITY, o(0))) == Dyadic(-1)
        assert midpoint(Segment(NEGATIVE_INFINITY, o(8))) == Dyadic(-1)

    def test_real_line(self) -> None:
        assert midpoint(Region.real_line().segments[0]) == Dyadic(0)

    @pytest.mark.parametrize(
        "s",
        [
            Segment(POSITIVE_INFINITY, POSITIVE_INFINITY),
            Segment(NEGATIVE_INFINITY, NEGATIVE_INFINITY),
            Segment(c(0), NEGATIVE_INFINITY),
            Segment(c(2), c(1)),
            Segment(o(1), c(1)),
        ],
    )
    def test_rejects_malformed(self, s: Segment) -> None:
        with pytest.raises(ValueError):
            midpoint(s)


class TestSplit:
    def test_split_at_given_point(self) -> None:
        m = midpoint(Region.open_right_ray(1).segments[0])
        lo, hi = split(Region.closed_right_ray(0).segments[0], at=m)
        assert str(lo) == "[0,2]"
        assert str(hi) == "[2,+inf)"

    def test_split_at_midpoint(self) -> None:
        lo, hi = split(Segment(o(0), o(1)))
        assert str(lo) == "(0,0.5]"
        assert str(hi) == "[0.5,1)"
        lo, hi = split(Segment(c(0), POSITIVE_INFINITY))
        assert str(lo) == "[0,1]"
        assert str(hi) == "[1,+inf)"

    def test_halves_cover_segment(self) -> None:
        s = Segment(NEGATIVE_INFINITY, o(Dyadic(-5, 2)))
        lo, hi = split(s)
        whole = Region.from_segments([s])
        assert Region.from_segments([lo]) | Region.from_segments([hi]) == whole

    def test_rejects_points_outside(self) -> None:
        with pytest.raises(ValueError):
            split(Segment(o(0), o(1)), at=1)
        with pytest.raises(ValueError):
            split(Segment(c(0), c(1)), at=float("inf"))
        with pytest.raises(ValueError):
            split(Segment(POSITIVE_INFINITY, c(1)), at=0)
        with pytest.raises(ValueError):
            split(Segment(c(2), c(1)), at=Dyadic(3, 2))
        with pytest.raises(ValueError):
            split(Segment(c(0), NEGATIVE_INFINITY), at=-1)
