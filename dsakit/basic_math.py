"""Elementary number routines: digits, divisors, GCD and primality."""

import math


def reverse_digits(n: int) -> str:
    """Return the decimal text of ``n`` reversed character by character."""
    return str(n)[::-1]


def count_digits(n: int) -> int:
    """Count decimal digits of a positive integer; zero and negatives give 0."""
    count = 0
    while n > 0:
        n //= 10
        count += 1
    return count


def reverse_number(n: int) -> int:
    """Return the digits of a positive integer reversed; zero and negatives give 0."""
    reversed_value = 0
    while n > 0:
        reversed_value = reversed_value * 10 + n % 10
        n //= 10
    return reversed_value


def armstrong_sum(n: int) -> int:
    """Return the sum of each digit of ``n`` raised to the number of digits."""
    power = count_digits(n)
    total = 0
    while n > 0:
        total += (n % 10) ** power
        n //= 10
    return total


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals its own Armstrong sum."""
    return armstrong_sum(n) == n


def is_palindrome_number(n: int) -> bool:
    """Tell whether ``n`` reads the same with its digits reversed."""
    return reverse_number(n) == n


def divisors_naive(n: int) -> list[int]:
    """Return the divisors of ``n`` from 1 to ``n // 2``, in ascending order."""
    return [i for i in range(1, n // 2 + 1) if n % i == 0]


def divisors(n: int) -> list[int]:
    """Return sorted divisor pairs ``i`` and ``n // i`` for every ``i`` with ``i * i < n``.

    An exact square root is not reached by this bound and is left out.
    """
    found = []
    i = 1
    while i * i < n:
        if n % i == 0:
            found.append(i)
            if n // i != i:
                found.append(n // i)
        i += 1
    return sorted(found)


def gcd_bruteforce(a: int, b: int) -> int:
    """Greatest common divisor by trying candidates downward from the smaller value."""
    a, b = abs(a), abs(b)
    if a == 0:
        return b
    if b == 0:
        return a
    for candidate in range(min(a, b), 1, -1):
        if a % candidate == 0 and b % candidate == 0:
            return candidate
    return 1


def gcd_subtraction(a: int, b: int) -> int:
    """Greatest common divisor by repeated subtraction of non-negative values."""
    if a < 0 or b < 0:
        raise ValueError("gcd_subtraction needs non-negative values")
    while a != 0 and b != 0:
        if a > b:
            a -= b
        else:
            b -= a
    return b if a == 0 else a


def gcd_modulo(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's remainder method."""
    while a > 0 and b > 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


def is_prime(n: int) -> bool:
    """Tell whether ``n`` has no divisor between 2 and ``n // 2``.

    Values below 4, including 0, 1 and negatives, are reported prime.
    """
    if n < 4:
        return True
    return all(n % i for i in range(2, math.isqrt(n) + 1))