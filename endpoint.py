from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
from dyadic import Dyadic, NUMBER, NEG_INF_KIND, POS_INF_KIND, NEGATIVE_INFINITY as D_NEG_INF, POSITIVE_INFINITY as D_POS_INF

NEG_INF = "NEG_INF"
POS_INF = "POS_INF"
OPEN = "OPEN"
CLOSED = "CLOSED"

@dataclass(frozen=True)
class Endpoint:
	kind: str  # 'NEG_INF','POS_INF','OPEN','CLOSED'
	value: Optional[Dyadic] = None
	def __post_init__(self) -> None:
		if self.kind in (OPEN, CLOSED):
			if self.value is None or not self.value.is_finite():
				raise ValueError(f"{self.kind} endpoint needs a finite dyadic value")
		elif self.kind in (NEG_INF, POS_INF):
			if self.value is not None:
				raise ValueError("infinite endpoints carry no value")
		else:
			raise ValueError(f"Unknown endpoint kind {self.kind!r}")
	@staticmethod
	def open(v: Dyadic | int | float) -> Endpoint:
		return Endpoint(OPEN, Dyadic.of(v))
	@staticmethod
	def closed(v: Dyadic | int | float) -> Endpoint:
		return Endpoint(CLOSED, Dyadic.of(v))
	def is_finite(self) -> bool:
		return self.value is not None
	def is_open(self) -> bool:
		return self.kind == OPEN
	def is_closed(self) -> bool:
		return self.kind == CLOSED
	def __repr__(self) -> str:
		if self.kind == NEG_INF:
			return "NegativeInfinity"
		if self.kind == POS_INF:
			return "PositiveInfinity"
		return f"{self.kind.capitalize()}({self.value})"

NEGATIVE_INFINITY = Endpoint(NEG_INF)
POSITIVE_INFINITY = Endpoint(POS_INF)

def closed_of_dyadic(d: Dyadic) -> Endpoint:
	kind = d.classify()
	if kind == NUMBER:
		return Endpoint(CLOSED, d)
	if kind == NEG_INF_KIND:
		return NEGATIVE_INFINITY
	if kind == POS_INF_KIND:
		return POSITIVE_INFINITY
	raise ValueError("closed_of_dyadic: NaN is not a boundary")

def dyadic_of_endpoint(p: Endpoint) -> Dyadic:
	if p.kind == NEG_INF:
		return D_NEG_INF
	if p.kind == POS_INF:
		return D_POS_INF
	return p.value

def _cmp(p1: Endpoint, p2: Endpoint, left: bool) -> int:
	if p1.kind == NEG_INF:
		return 0 if p2.kind == NEG_INF else -1
	if p2.kind == NEG_INF:
		return 1
	if p1.kind == POS_INF:
		return 0 if p2.kind == POS_INF else 1
	if p2.kind == POS_INF:
		return -1
	c = p1.value.cmp(p2.value)
	if c != 0 or p1.kind == p2.kind:
		return c
	# same value, different kind: an open left bound starts after the value,
	# an open right bound stops before it
	if p1.kind == OPEN:
		return 1 if left else -1
	return -1 if left else 1

def cmp_left(p1: Endpoint, p2: Endpoint) -> int:
	"""Compare two endpoints used as left bounds of their segments."""
	return _cmp(p1, p2, True)

def cmp_right(p1: Endpoint, p2: Endpoint) -> int:
	"""Compare two endpoints used as right bounds of their segments."""
	return _cmp(p1, p2, False)

def lt_left(p1: Endpoint, p2: Endpoint) -> bool:
	return cmp_left(p1, p2) < 0

def lt_right(p1: Endpoint, p2: Endpoint) -> bool:
	return cmp_right(p1, p2) < 0

def leq_left(p1: Endpoint, p2: Endpoint) -> bool:
	return cmp_left(p1, p2) <= 0

def leq_right(p1: Endpoint, p2: Endpoint) -> bool:
	return cmp_right(p1, p2) <= 0

def min_left(p1: Endpoint, p2: Endpoint) -> Endpoint:
	return p1 if cmp_left(p1, p2) <= 0 else p2

def max_left(p1: Endpoint, p2: Endpoint) -> Endpoint:
	return p2 if cmp_left(p1, p2) <= 0 else p1

def min_right(p1: Endpoint, p2: Endpoint) -> Endpoint:
	return p1 if cmp_right(p1, p2) <= 0 else p2

def max_right(p1: Endpoint, p2: Endpoint) -> Endpoint:
	return p2 if cmp_right(p1, p2) <= 0 else p1

def touch(p1: Endpoint, p2: Endpoint) -> bool:
	"""Same finite value with complementary open/closed kind."""
	if {p1.kind, p2.kind} != {OPEN, CLOSED}:
		return False
	return p1.value == p2.value

def is_interval(a: Endpoint, b: Endpoint) -> bool:
	if b.kind == NEG_INF or a.kind == POS_INF:
		return False
	if a.kind == NEG_INF or b.kind == POS_INF:
		return True
	c = a.value.cmp(b.value)
	if a.kind == CLOSED and b.kind == CLOSED:
		return c <= 0
	return c < 0

def invert_closure(p: Endpoint) -> Endpoint:
	if p.kind == OPEN:
		return Endpoint(CLOSED, p.value)
	if p.kind == CLOSED:
		return Endpoint(OPEN, p.value)
	raise AssertionError(f"invert_closure: {p!r} has no closure to invert")

def closure_of(p: Endpoint) -> Endpoint:
	if p.kind == OPEN:
		return Endpoint(CLOSED, p.value)
	return p

def string_of_left(p: Endpoint) -> str:
	if p.kind == NEG_INF:
		return "(-inf"
	if p.kind == OPEN:
		return "(" + p.value.to_string()
	if p.kind == CLOSED:
		return "[" + p.value.to_string()
	raise AssertionError("PositiveInfinity is never a left bound")

def string_of_right(p: Endpoint) -> str:
	if p.kind == POS_INF:
		return "+inf)"
	if p.kind == OPEN:
		return p.value.to_string() + ")"
	if p.kind == CLOSED:
		return p.value.to_string() + "]"
	raise AssertionError("NegativeInfinity is never a right bound")
