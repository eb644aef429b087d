from .basic import BigInteger, is_negative


def eq(lhs: BigInteger, rhs: BigInteger) -> bool:
    if lhs is rhs:
        return True
    return lhs.is_neg == rhs.is_neg and len(lhs.rep) == len(rhs.rep) and lhs.rep == rhs.rep


def abs_lt(lhs: BigInteger, rhs: BigInteger) -> bool:
    """True when |lhs| < |rhs|. Signs are ignored."""
    if len(lhs.rep) != len(rhs.rep):
        return len(lhs.rep) < len(rhs.rep)

    for i in range(len(lhs.rep) - 1, -1, -1):
        if lhs.rep[i] != rhs.rep[i]:
            return lhs.rep[i] < rhs.rep[i]
    return False


def lt(lhs: BigInteger, rhs: BigInteger) -> bool:
    if lhs.is_neg != rhs.is_neg:
        return is_negative(lhs)
    if is_negative(rhs):
        return abs_lt(rhs, lhs)
    return abs_lt(lhs, rhs)


def ge(lhs: BigInteger, rhs: BigInteger) -> bool:
    return not lt(lhs, rhs)


def gt(lhs: BigInteger, rhs: BigInteger) -> bool:
    return lt(rhs, lhs)


def le(lhs: BigInteger, rhs: BigInteger) -> bool:
    return not lt(rhs, lhs)
