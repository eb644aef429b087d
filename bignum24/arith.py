"""
Signed add, subtract and multiply on 24-bit limbs.

`add` and `sub` hand mixed-sign cases to each other, so the carry and borrow
loops below only ever see operands of the same sign.
"""
from typing import List

from .basic import RADIX, ZERO, BigInteger, is_zero, mint
from .compare import abs_lt
from .sign import neg


def add(augend: BigInteger, addend: BigInteger) -> BigInteger:
    if is_zero(augend):
        return addend
    if is_zero(addend):
        return augend
    if augend.is_neg != addend.is_neg:
        return sub(augend, neg(addend))

    # make augend the longer one
    if len(augend.rep) < len(addend.rep):
        augend, addend = addend, augend

    size = len(addend.rep)
    carry = 0
    result: List[int] = []
    for i, x in enumerate(augend.rep):
        acc = x + (addend.rep[i] if i < size else 0) + carry
        if acc >= RADIX:
            carry = 1
            acc -= RADIX
        else:
            carry = 0
        result.append(acc)
    if carry > 0:
        result.append(carry)
    return mint(result, augend.is_neg)


def sub(minuend: BigInteger, subtrahend: BigInteger) -> BigInteger:
    if is_zero(minuend):
        return neg(subtrahend)
    if is_zero(subtrahend):
        return minuend
    if minuend.is_neg != subtrahend.is_neg:
        return add(minuend, neg(subtrahend))

    is_neg = minuend.is_neg
    if abs_lt(minuend, subtrahend):
        minuend, subtrahend = subtrahend, minuend
        is_neg = not is_neg

    size = len(subtrahend.rep)
    borrow = 0
    result: List[int] = []
    for i, x in enumerate(minuend.rep):
        diff = x - (subtrahend.rep[i] if i < size else 0) - borrow
        if diff < 0:
            diff += RADIX
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    return mint(result, is_neg)


def mul(multiplicand: BigInteger, multiplier: BigInteger) -> BigInteger:
    if is_zero(multiplicand) or is_zero(multiplier):
        return ZERO

    size = len(multiplier.rep)
    result: List[int] = [0] * (len(multiplicand.rep) + size)
    for i, x in enumerate(multiplicand.rep):
        carry = 0
        for j, y in enumerate(multiplier.rep):
            acc = x * y + result[i + j] + carry
            result[i + j] = acc % RADIX
            carry = acc // RADIX
        result[i + size] = carry
    return mint(result, multiplicand.is_neg != multiplier.is_neg)
