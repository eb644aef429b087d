from .arith import add, mul, sub
from .basic import (
    BITS,
    MASK,
    MAX_SAFE_INTEGER,
    NEGATIVE_ONE,
    ONE,
    RADIX,
    TEN,
    TWO,
    ZERO,
    BigInteger,
    from_int,
    is_big_integer,
    is_negative,
    is_positive,
    is_zero,
    mint,
)
from .bitwise import and_, mask, not_, or_, random, xor
from .compare import abs_lt, eq, ge, gt, le, lt
from .narrow import int_
from .shift import shift_down, shift_up
from .sign import abs_, neg, signum

__all__ = [
    "BITS",
    "MASK",
    "MAX_SAFE_INTEGER",
    "NEGATIVE_ONE",
    "ONE",
    "RADIX",
    "TEN",
    "TWO",
    "ZERO",
    "BigInteger",
    "abs_",
    "abs_lt",
    "add",
    "and_",
    "eq",
    "from_int",
    "ge",
    "gt",
    "int_",
    "is_big_integer",
    "is_negative",
    "is_positive",
    "is_zero",
    "le",
    "lt",
    "mask",
    "mint",
    "mul",
    "neg",
    "not_",
    "or_",
    "random",
    "shift_down",
    "shift_up",
    "signum",
    "sub",
    "xor",
]
