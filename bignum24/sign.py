from .basic import NEGATIVE_ONE, ONE, ZERO, BigInteger, is_negative, is_zero, mint


def neg(big: BigInteger) -> BigInteger:
    if is_zero(big):
        return ZERO
    return mint(list(big.rep), not big.is_neg)


def abs_(big: BigInteger) -> BigInteger:
    if is_zero(big):
        return ZERO
    return neg(big) if is_negative(big) else big


def signum(big: BigInteger) -> BigInteger:
    if is_zero(big):
        return ZERO
    return NEGATIVE_ONE if is_negative(big) else ONE
