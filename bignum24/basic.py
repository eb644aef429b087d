from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

BITS = 24
RADIX = (1<<BITS)
RADIX_SQUARED = RADIX * RADIX
MASK = RADIX - 1
MAX_SAFE_INTEGER = (1<<53) - 1


@dataclass(frozen=True)
class BigInteger:
    """
    Signed magnitude in base 2^24, least significant limb first.

    Instances are canonical: no trailing zero limb, every limb in [0, RADIX)
    and zero is never negative. Build them through `mint`.
    """
    is_neg: bool
    rep: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.is_neg, bool):
            raise ValueError(f"Invalid sign tag: {self.is_neg!r}")
        if not isinstance(self.rep, tuple):
            raise ValueError(f"Limbs must be a tuple, found {type(self.rep).__name__}")
        for i, limb in enumerate(self.rep):
            if not isinstance(limb, int) or not 0 <= limb < RADIX:
                raise ValueError(f"Limb {i} out of range: {limb!r}")
        if self.rep and self.rep[-1] == 0:
            raise ValueError("Trailing zero limb")
        if self.is_neg and not self.rep:
            raise ValueError("Zero cannot be negative")

    def to_int(self) -> int:
        a = 0
        for x in self.rep[::-1]:
            a = a * RADIX + x
        return -a if self.is_neg else a

    def __len__(self) -> int:
        return len(self.rep)

    def __getitem__(self, val):
        return self.rep[val]

    def __repr__(self) -> str:
        return f"{'-' if self.is_neg else '+'}{list(self.rep)}"

    def __bool__(self) -> bool:
        return bool(self.rep)

    # Operators delegate to the module functions; imports are local because
    # those modules import this one.

    def __neg__(self) -> 'BigInteger':
        from .sign import neg
        return neg(self)

    def __pos__(self) -> 'BigInteger':
        return self

    def __abs__(self) -> 'BigInteger':
        from .sign import abs_
        return abs_(self)

    def __add__(self, other) -> 'BigInteger':
        from .arith import add
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    def __radd__(self, other) -> 'BigInteger':
        from .arith import add
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(other, self)

    def __sub__(self, other) -> 'BigInteger':
        from .arith import sub
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return sub(self, other)

    def __rsub__(self, other) -> 'BigInteger':
        from .arith import sub
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return sub(other, self)

    def __mul__(self, other) -> 'BigInteger':
        from .arith import mul
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return mul(self, other)

    def __rmul__(self, other) -> 'BigInteger':
        from .arith import mul
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return mul(other, self)

    def __and__(self, other) -> 'BigInteger':
        from .bitwise import and_
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return and_(self, other)

    __rand__ = __and__

    def __or__(self, other) -> 'BigInteger':
        from .bitwise import or_
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return or_(self, other)

    __ror__ = __or__

    def __xor__(self, other) -> 'BigInteger':
        from .bitwise import xor
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return xor(self, other)

    __rxor__ = __xor__

    def __lshift__(self, other) -> 'BigInteger':
        from .shift import shift_up
        if not isinstance(other, (int, BigInteger)):
            return NotImplemented
        res = shift_up(self, other)
        if res is None:
            raise ValueError(f"Shift count is not a safe integer: {other!r}")
        return res

    def __rshift__(self, other) -> 'BigInteger':
        from .shift import shift_down
        if not isinstance(other, (int, BigInteger)):
            return NotImplemented
        res = shift_down(self, other)
        if res is None:
            raise ValueError(f"Shift count is not a safe integer: {other!r}")
        return res

    def __lt__(self, other) -> bool:
        from .compare import lt
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return lt(self, other)

    def __le__(self, other) -> bool:
        from .compare import le
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return le(self, other)

    def __gt__(self, other) -> bool:
        from .compare import gt
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return gt(self, other)

    def __ge__(self, other) -> bool:
        from .compare import ge
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return ge(self, other)


ZERO = BigInteger(False, ())
ONE = BigInteger(False, (1,))
TWO = BigInteger(False, (2,))
TEN = BigInteger(False, (10,))
NEGATIVE_ONE = BigInteger(True, (1,))


def mint(rep: Sequence[int], is_neg: bool = False) -> BigInteger:
    """
    Canonicalize a candidate limb sequence.

    Trailing zero limbs are dropped, popular constants are substituted with
    their shared singleton and anything else is frozen into a new instance.
    """
    i = len(rep)
    while i > 0:
        if rep[i - 1] != 0:
            break
        i -= 1
    if i == 0:
        return ZERO
    if i == 1:
        if is_neg:
            if rep[0] == 1:
                return NEGATIVE_ONE
        elif rep[0] == 1:
            return ONE
        elif rep[0] == 2:
            return TWO
        elif rep[0] == 10:
            return TEN
    return BigInteger(bool(is_neg), tuple(rep[:i]))


def to_internal(n: int) -> List[int]:
    a: List[int] = []
    n = abs(n)
    while n > 0:
        a.append(n % RADIX)
        n //= RADIX
    return a


def from_int(n: int) -> BigInteger:
    return mint(to_internal(n), n < 0)


def is_big_integer(big) -> bool:
    return isinstance(big, BigInteger)


def is_negative(big) -> bool:
    return isinstance(big, BigInteger) and big.is_neg


def is_positive(big) -> bool:
    return isinstance(big, BigInteger) and not big.is_neg


def is_zero(big) -> bool:
    return isinstance(big, BigInteger) and len(big.rep) == 0


def _coerce(other: Union[int, BigInteger]):
    if isinstance(other, BigInteger):
        return other
    if isinstance(other, int) and not isinstance(other, bool):
        return from_int(other)
    return None
