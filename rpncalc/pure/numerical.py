"""Integer arithmetic policies. A policy stands in for the integer type T that an expression is computed in: it owns
T's range and the guards of T's four operations, so that the parser and evaluator never have to know which T they are
working with.

Overflow is checked for every bounded T: a literal or a result outside of T's range raises Overflow instead of
wrapping around. Unbounded policies (bits=None) behave like Python ints and never overflow.
"""

from dataclasses import dataclass
from typing import Optional

from rpncalc.lang.error import DivisionByZero, Overflow, Underflow
from rpncalc.pure.tokens import OperatorKind


@dataclass(frozen=True)
class IntegerPolicy:
    name: str
    bits: Optional[int]
    signed: bool

    @property
    def min(self):
        """Smallest value of T, or None if T is unbounded below."""
        if not self.signed:
            return 0
        if self.bits is None:
            return None
        return -(1 << (self.bits - 1))

    @property
    def max(self):
        """Largest value of T, or None if T is unbounded above."""
        if self.bits is None:
            return None
        return (1 << (self.bits - 1 if self.signed else self.bits)) - 1

    def check(self, value):
        """Returns value if it is representable in T, else raises Overflow."""
        if (self.min is not None and value < self.min) or (self.max is not None and value > self.max):
            raise Overflow(value, self.name)
        return value

    def accumulate(self, value, digit):
        """Appends digit to the decimal literal value."""
        return self.check(value * 10 + digit)

    def add(self, left, right):
        return self.check(left + right)

    def sub(self, left, right):
        """Unsigned T can't represent a negative difference, so right > left underflows rather than wrapping."""
        if not self.signed and right > left:
            raise Underflow(left - right, self.name)
        return self.check(left - right)

    def mul(self, left, right):
        return self.check(left * right)

    def div(self, left, right):
        """Integer division truncating toward zero (Python's // floors, so the quotient is built from magnitudes)."""
        if right == 0:
            raise DivisionByZero()

        quotient = abs(left) // abs(right)
        if (left < 0) != (right < 0):
            quotient = -quotient
        return self.check(quotient)

    def apply(self, kind, left, right):
        """Applies the operation of OperatorKind kind to (left, right)."""
        return {
            OperatorKind.ADD: self.add,
            OperatorKind.SUB: self.sub,
            OperatorKind.MUL: self.mul,
            OperatorKind.DIV: self.div,
        }[kind](left, right)

    def __str__(self):
        return self.name


INT = IntegerPolicy("int", None, True)
UINT = IntegerPolicy("uint", None, False)

INT8 = IntegerPolicy("int8", 8, True)
INT16 = IntegerPolicy("int16", 16, True)
INT32 = IntegerPolicy("int32", 32, True)
INT64 = IntegerPolicy("int64", 64, True)

UINT8 = IntegerPolicy("uint8", 8, False)
UINT16 = IntegerPolicy("uint16", 16, False)
UINT32 = IntegerPolicy("uint32", 32, False)
UINT64 = IntegerPolicy("uint64", 64, False)

POLICIES = {policy.name: policy for policy in (INT, INT8, INT16, INT32, INT64, UINT, UINT8, UINT16, UINT32, UINT64)}


def get_policy(name):
    """Returns the IntegerPolicy called name. Raises KeyError if there is none."""
    try:
        return POLICIES[name]
    except KeyError:
        raise KeyError(f"unknown integer type '{name}' (expected one of {', '.join(POLICIES)})")
