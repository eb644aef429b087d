from typing import Optional, Union

from .basic import MAX_SAFE_INTEGER, RADIX, BigInteger

# Enough limbs to hold MAX_SAFE_INTEGER; anything longer is out of range.
SAFE_LIMBS = 3


def int_(value: Union[int, BigInteger]) -> Optional[int]:
    """
    Narrow a value to a native integer.

    Native integers pass through when they are within +/-MAX_SAFE_INTEGER.
    A BigInteger is rebuilt when its magnitude fits the same range.
    Everything else, including bools and floats, gives None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER:
            return value
        return None
    if not isinstance(value, BigInteger):
        return None
    if len(value.rep) > SAFE_LIMBS:
        return None

    result = 0
    for limb in value.rep[::-1]:
        result = result * RADIX + limb
    if result > MAX_SAFE_INTEGER:
        return None
    return -result if value.is_neg else result
