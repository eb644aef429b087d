from typing import List, Optional, Union

from .basic import BITS, MASK, ZERO, BigInteger, is_zero, mint
from .narrow import int_
from .sign import abs_


def shift_down(big: BigInteger, places: Union[int, BigInteger]) -> Optional[BigInteger]:
    """
    Right shift of the magnitude. The sign of `big` is dropped.

    Returns None when `places` is not a safe integer.
    """
    places = int_(places)
    if places is None:
        return None
    if is_zero(big):
        return ZERO
    if places == 0:
        return abs_(big)
    if places < 0:
        return shift_up(big, -places)

    skip = places // BITS
    places -= skip * BITS
    if skip >= len(big.rep):
        return ZERO

    rep = big.rep[skip:]
    if places == 0:
        return mint(list(rep))

    size = len(rep)
    result: List[int] = []
    for i in range(size):
        upper = rep[i + 1] if i + 1 < size else 0
        result.append(MASK & ((rep[i] >> places) | (upper << (BITS - places))))
    return mint(result)


def shift_up(big: BigInteger, places: Union[int, BigInteger]) -> Optional[BigInteger]:
    """
    Left shift of the magnitude. The sign of `big` is dropped.

    Returns None when `places` is not a safe integer.
    """
    places = int_(places)
    if places is None:
        return None
    if is_zero(big):
        return ZERO
    if places == 0:
        return abs_(big)
    if places < 0:
        return shift_down(big, -places)

    blanks = places // BITS
    result: List[int] = [0] * blanks
    places -= blanks * BITS
    if places == 0:
        return mint(result + list(big.rep))

    carry = 0
    for limb in big.rep:
        result.append(((limb << places) | carry) & MASK)
        carry = limb >> (BITS - places)
    if carry > 0:
        result.append(carry)
    return mint(result)
