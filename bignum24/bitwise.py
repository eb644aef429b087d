"""
Limb-wise logic on magnitudes.

Signs are ignored and every result is non-negative. Missing high limbs of the
shorter operand read as zero.
"""
import random as _random
from typing import Callable, List, Optional, Union

from .basic import BITS, MASK, RADIX, RADIX_SQUARED, BigInteger, mint
from .narrow import int_


def and_(lhs: BigInteger, rhs: BigInteger) -> BigInteger:
    # make lhs the shorter one
    if len(lhs.rep) > len(rhs.rep):
        lhs, rhs = rhs, lhs
    return mint([x & rhs.rep[i] for i, x in enumerate(lhs.rep)])


def or_(lhs: BigInteger, rhs: BigInteger) -> BigInteger:
    # make lhs the longer one
    if len(lhs.rep) < len(rhs.rep):
        lhs, rhs = rhs, lhs
    size = len(rhs.rep)
    return mint([x | (rhs.rep[i] if i < size else 0) for i, x in enumerate(lhs.rep)])


def xor(lhs: BigInteger, rhs: BigInteger) -> BigInteger:
    if len(lhs.rep) < len(rhs.rep):
        lhs, rhs = rhs, lhs
    size = len(rhs.rep)
    return mint([x ^ (rhs.rep[i] if i < size else 0) for i, x in enumerate(lhs.rep)])


def mask(nr_bits: Union[int, BigInteger]) -> Optional[BigInteger]:
    """All ones in the low `nr_bits` bits. None for a negative or unsafe count."""
    nr_bits = int_(nr_bits)
    if nr_bits is None or nr_bits < 0:
        return None

    mega = nr_bits // BITS
    result: List[int] = [MASK] * mega
    leftover = nr_bits - mega * BITS
    if leftover > 0:
        result.append((1 << leftover) - 1)
    return mint(result)


def not_(big: BigInteger, nr_bits: Union[int, BigInteger]) -> Optional[BigInteger]:
    wuns = mask(nr_bits)
    if wuns is None:
        return None
    return xor(big, wuns)


def random(
    nr_bits: Union[int, BigInteger],
    rng: Callable[[], float] = _random.random,
) -> Optional[BigInteger]:
    """
    Random non-negative value below 2**nr_bits.

    `rng` must return a float in [0, 1). It is called once per limb.
    """
    wuns = mask(nr_bits)
    if wuns is None:
        return None

    result: List[int] = []
    for limb in wuns.rep:
        bits = rng()
        result.append((int(bits * RADIX_SQUARED) ^ int(bits * RADIX)) & limb)
    return mint(result)
