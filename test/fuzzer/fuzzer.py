from pathlib import Path
import os
from typing import List, Optional
from dataclasses import dataclass
import argparse
from random import getrandbits, randint, seed
import sys
import time

import primefac

from bignum24 import ONE, BigInteger, add, from_int, mul, shift_down, shift_up, sub

CURRENT_PATH = Path(os.path.realpath(__file__)) / '..'
ERROR_INPUT = (CURRENT_PATH / 'error.txt').resolve()

OPS = {
    'a': (add, '+', lambda a, b: a + b),
    's': (sub, '-', lambda a, b: a - b),
    'm': (mul, '*', lambda a, b: a * b),
}

@dataclass
class Result:
    success: Optional[int] = None
    error: Optional[str] = None
    elapsed: float = 0.0

def random_number(bits: int, is_neg: bool = False) -> int:
    if bits <= 0:
        return 0
    # force the top bit so the operand really has `bits` bits
    n = getrandbits(bits) | (1 << (bits - 1))
    return -n if is_neg else n

def shorten(num: str, size: int) -> str:
    if len(num) > size:
        return num[:size] + '...'
    return num

def write_error(lines: List[str]) -> None:
    with open(ERROR_INPUT, 'w') as f:
        f.write('\n'.join(lines))
        f.write('\n')

def print_error(what: str, err: str) -> None:
    print(f"{what} -- \x1b[31mFAILED\x1b[0m\n\t{err}")

def print_success(what: str, elapsed: float) -> None:
    print(f"{what} -- \x1b[32mPASSED\x1b[0m\n\tTook {elapsed * 1000:.3f}ms")

def run_op(fn, *args) -> Result:
    start = time.perf_counter()
    res = fn(*args)
    elapsed = time.perf_counter() - start
    if not isinstance(res, BigInteger):
        return Result(error=f"Expected a BigInteger, found {res!r}", elapsed=elapsed)
    return Result(success=res.to_int(), elapsed=elapsed)

def check_binary(a: int, b: int, op: str = 'a', verbose: bool = False) -> bool:
    fn, sym, native = OPS[op]
    what = f"{shorten(hex(a), 50)} {sym} {shorten(hex(b), 50)}"
    ans = native(a, b)
    res = run_op(fn, from_int(a), from_int(b))
    if res.error:
        write_error([hex(a), hex(b), hex(ans)])
        print_error(what, res.error)
        return False

    if res.success != ans:
        write_error([hex(a), hex(b), hex(ans)])
        print_error(what, f"Mismatch: {shorten(hex(res.success), 50)} != {shorten(hex(ans), 50)}")
        return False

    if verbose:
        print_success(what, res.elapsed)
    return True

def check_shift(a: int, places: int, verbose: bool = False) -> bool:
    big = from_int(a)
    cases = [
        (shift_up, '<<', abs(a) << places),
        (shift_down, '>>', abs(a) >> places),
    ]
    for fn, sym, ans in cases:
        what = f"|{shorten(hex(a), 50)}| {sym} {places}"
        res = run_op(fn, big, places)
        if res.error:
            write_error([hex(a), str(places), hex(ans)])
            print_error(what, res.error)
            return False
        if res.success != ans:
            write_error([hex(a), str(places), hex(ans)])
            print_error(what, f"Mismatch: {shorten(hex(res.success), 50)} != {shorten(hex(ans), 50)}")
            return False
        if verbose:
            print_success(what, res.elapsed)
    return True

def prime_factors(n: int) -> List[int]:
    res: List[int] = []

    gen = primefac.primefac(n)
    for i in gen:
        res.append(i)

    return res

def check_factor(n: int, verbose: bool = False) -> bool:
    """Multiply the prime factors of `n` back together and compare with `n`."""
    what = f"prod(factors({shorten(str(n), 50)}))"
    factors = prime_factors(n)
    start = time.perf_counter()
    product = ONE
    for f in factors:
        product = mul(product, from_int(f))
    elapsed = time.perf_counter() - start

    if product.to_int() != n:
        write_error([str(n)] + [str(f) for f in factors])
        print_error(what, f"Mismatch: {shorten(str(product.to_int()), 50)} != {shorten(str(n), 50)}")
        return False

    if verbose:
        print_success(what, elapsed)
    return True

def fuzz_binary(iterations: int, op: str = 'a', max_bits: int = 2000, verbose: bool = True) -> bool:
    for _ in range(iterations):
        a_neg = True if randint(0, 10) > 5 else False
        b_neg = True if randint(0, 10) > 5 else False
        a = random_number(randint(0, max_bits), a_neg)
        b = random_number(randint(0, max_bits), b_neg)
        if not check_binary(a, b, op, verbose):
            return False
    return True

def fuzz_shift(iterations: int, max_bits: int = 2000, verbose: bool = True) -> bool:
    for _ in range(iterations):
        is_neg = True if randint(0, 10) > 5 else False
        bits = randint(1, max_bits)
        a = random_number(bits, is_neg)
        places = randint(0, bits + 48)
        if not check_shift(a, places, verbose):
            return False
    return True

def fuzz_factor(iterations: int, max_bits: int = 60, verbose: bool = True) -> bool:
    for _ in range(iterations):
        n = random_number(randint(2, max_bits))
        if not check_factor(n, verbose):
            return False
    return True

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="Fuzzer")
    parser.add_argument('-b', '--binary', help="Fuzzy test binary operation.", choices=['a', 's', 'm'])
    parser.add_argument('-s', '--shift', action=argparse.BooleanOptionalAction, help="Fuzzy test shifting.")
    parser.add_argument('-f', '--factor', action=argparse.BooleanOptionalAction, help="Fuzzy test multiplication against prime factorisation.")
    parser.add_argument('-n', '--iterations', type=int, default=1000, help="Number of random cases.")
    parser.add_argument('--bits', type=int, default=None, help="Maximum operand size in bits.")
    parser.add_argument('--seed', default="BigNum", help="Seed for the random generator.")

    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    seed(args.seed)
    ok = True
    if args.binary:
        ok = fuzz_binary(args.iterations, op=args.binary, max_bits=args.bits or 2000)
    elif args.shift:
        ok = fuzz_shift(args.iterations, max_bits=args.bits or 2000)
    elif args.factor:
        ok = fuzz_factor(args.iterations, max_bits=args.bits or 60)
    else:
        print("Nothing to do: pass one of --binary, --shift or --factor.")
    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())
