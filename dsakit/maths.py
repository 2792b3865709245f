"""Number theory helpers: base conversion, fast powers, gcd/lcm, primality."""

from __future__ import annotations

_DIGITS = "0123456789ABCDEF"


def to_base(num: int, base: int) -> str:
    """Return ``num`` written in ``base`` (2 to 16), upper-case digits."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    if num < 0:
        raise ValueError(f"num must be non-negative, got {num}")
    if num == 0:
        return "0"
    digits = []
    while num > 0:
        num, remainder = divmod(num, base)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def fast_exp(a: int, b: int) -> int:
    """Return ``a ** b`` by binary exponentiation."""
    if b < 0:
        raise ValueError(f"exponent must be non-negative, got {b}")
    result = 1
    while b > 0:
        if b & 1:
            result *= a
        a *= a
        b >>= 1
    return result


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return abs(a)


def lcm(a: int, b: int) -> int:
    """Return the least common multiple; 0 if either argument is 0."""
    if a == 0 or b == 0:
        return 0
    return abs(a // gcd(a, b) * b)


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, by trial division up to its square root."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0