from __future__ import annotations
from fractions import Fraction
from typing import Optional

# rounding directions for double()
UP = "up"
DOWN = "down"

# None keeps doubling exact
DEFAULT_PRECISION: Optional[int] = None

NUMBER = "number"
NAN_KIND = "nan"
NEG_INF_KIND = "negative_infinity"
POS_INF_KIND = "positive_infinity"

def _is_power_of_two(n: int) -> bool:
	return n > 0 and n & (n - 1) == 0

class Dyadic:
	"""Exact binary fraction m / 2^k, extended with NaN and the two infinities."""
	__slots__ = ("_f", "_kind")
	def __init__(self, num: int | Fraction, den: int | None = None) -> None:
		if isinstance(num, Fraction):
			f = num if den is None else num / den
		else:
			f = Fraction(num, 1 if den is None else den)
		if not _is_power_of_two(f.denominator):
			raise ValueError(f"{f} is not a dyadic number")
		self._f: Optional[Fraction] = f
		self._kind = NUMBER
	@classmethod
	def _special(cls, kind: str) -> Dyadic:
		d = cls.__new__(cls)
		d._f = None
		d._kind = kind
		return d
	@staticmethod
	def from_float(x: float) -> Dyadic:
		if x != x:
			return NAN
		if x == float("inf"):
			return POSITIVE_INFINITY
		if x == float("-inf"):
			return NEGATIVE_INFINITY
		return Dyadic(Fraction(x))
	@staticmethod
	def of(x: Dyadic | int | float) -> Dyadic:
		if isinstance(x, Dyadic):
			return x
		if isinstance(x, bool):
			raise TypeError("bool is not a number")
		if isinstance(x, int):
			return Dyadic(x)
		if isinstance(x, float):
			return Dyadic.from_float(x)
		raise TypeError(f"Cannot convert {type(x).__name__} to Dyadic")
	@staticmethod
	def parse(text: str) -> Dyadic:
		s = text.strip().lower()
		if s in ("inf", "+inf", "infinity", "+infinity"):
			return POSITIVE_INFINITY
		if s in ("-inf", "-infinity"):
			return NEGATIVE_INFINITY
		if s == "nan":
			return NAN
		try:
			f = Fraction(s)
		except ValueError:
			raise ValueError(f"Cannot parse dyadic number from {text!r}") from None
		return Dyadic(f)
	def classify(self) -> str:
		return self._kind
	def is_finite(self) -> bool:
		return self._kind == NUMBER
	def is_nan(self) -> bool:
		return self._kind == NAN_KIND
	def is_infinite(self) -> bool:
		return self._kind in (NEG_INF_KIND, POS_INF_KIND)
	def fraction(self) -> Fraction:
		if self._f is None:
			raise ValueError(f"{self.to_string()} has no finite value")
		return self._f
	def _rank(self) -> int:
		if self._kind == NEG_INF_KIND:
			return -1
		if self._kind == POS_INF_KIND:
			return 1
		return 0
	def cmp(self, other: Dyadic) -> int:
		"""Total order on non-NaN values: -1, 0 or 1."""
		if self.is_nan() or other.is_nan():
			raise ValueError("NaN cannot be compared")
		ra, rb = self._rank(), other._rank()
		if ra != rb:
			return -1 if ra < rb else 1
		if ra != 0:
			return 0
		if self._f < other._f:
			return -1
		return 1 if self._f > other._f else 0
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Dyadic):
			return NotImplemented
		if self.is_nan() or other.is_nan():
			return False
		return self._kind == other._kind and self._f == other._f
	def __hash__(self) -> int:
		return hash((self._kind, self._f))
	def __lt__(self, other: Dyadic) -> bool:
		return self.cmp(other) < 0
	def __le__(self, other: Dyadic) -> bool:
		return self.cmp(other) <= 0
	def __gt__(self, other: Dyadic) -> bool:
		return self.cmp(other) > 0
	def __ge__(self, other: Dyadic) -> bool:
		return self.cmp(other) >= 0
	def __neg__(self) -> Dyadic:
		if self._kind == NEG_INF_KIND:
			return POSITIVE_INFINITY
		if self._kind == POS_INF_KIND:
			return NEGATIVE_INFINITY
		if self.is_nan():
			return NAN
		return Dyadic(-self._f)
	def __add__(self, other: Dyadic) -> Dyadic:
		if self.is_nan() or other.is_nan():
			return NAN
		if self.is_infinite() or other.is_infinite():
			# inf + -inf
			if self.is_infinite() and other.is_infinite() and self._kind != other._kind:
				return NAN
			return self if self.is_infinite() else other
		return Dyadic(self._f + other._f)
	def __sub__(self, other: Dyadic) -> Dyadic:
		return self + (-other)
	def average(self, other: Dyadic) -> Dyadic:
		s = self + other
		if not s.is_finite():
			return s
		return Dyadic(s._f / 2)
	def double(self, round: str = UP, prec: Optional[int] = DEFAULT_PRECISION) -> Dyadic:
		if round not in (UP, DOWN):
			raise ValueError(f"Unknown rounding direction {round!r}")
		if not self.is_finite():
			return self
		return Dyadic(self._f * 2).round_to(prec, round)
	def round_to(self, prec: Optional[int], round: str = UP) -> Dyadic:
		"""Round to at most `prec` significant bits in the given direction."""
		if prec is None or not self.is_finite():
			return self
		if prec < 1:
			raise ValueError("precision must be at least one bit")
		n, d = self._f.numerator, self._f.denominator
		shift = abs(n).bit_length() - prec
		if shift <= 0:
			return self
		m = n >> shift if round == DOWN else -((-n) >> shift)
		return Dyadic(Fraction(m * 2**shift, d))
	def to_string(self) -> str:
		if self._kind == NAN_KIND:
			return "nan"
		if self._kind == POS_INF_KIND:
			return "inf"
		if self._kind == NEG_INF_KIND:
			return "-inf"
		n, d = self._f.numerator, self._f.denominator
		if d == 1:
			return str(n)
		# n / 2^k == n * 5^k / 10^k, always a terminating decimal
		k = d.bit_length() - 1
		digits = str(abs(n) * 5**k).rjust(k + 1, "0")
		sign = "-" if n < 0 else ""
		return f"{sign}{digits[:-k]}.{digits[-k:]}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Dyadic({self.to_string()})"

ZERO = Dyadic(0)
ONE = Dyadic(1)
NEGATIVE_ONE = Dyadic(-1)
POSITIVE_INFINITY = Dyadic._special(POS_INF_KIND)
NEGATIVE_INFINITY = Dyadic._special(NEG_INF_KIND)
NAN = Dyadic._special(NAN_KIND)

def average(a: Dyadic, b: Dyadic) -> Dyadic:
	return a.average(b)
