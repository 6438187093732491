import math

import pytest

from dsakit.basic_math import (
    armstrong_sum,
    count_digits,
    divisors,
    divisors_naive,
    gcd_bruteforce,
    gcd_modulo,
    gcd_subtraction,
    is_armstrong,
    is_palindrome_number,
    is_prime,
    reverse_digits,
    reverse_number,
)

NO_TRAILING_ZERO = [1, 7, 12, 123, 4567, 98761, 1000001]


@pytest.mark.parametrize("n", NO_TRAILING_ZERO)
def test_reverse_digits_round_trip(n):
    assert int(reverse_digits(int(reverse_digits(n)))) == n


@pytest.mark.parametrize("n", NO_TRAILING_ZERO)
def test_reverse_number_round_trip_and_agrees_with_text(n):
    assert reverse_number(reverse_number(n)) == n
    assert str(reverse_number(n)) == reverse_digits(n)


def test_reverse_number_non_positive():
    assert reverse_number(0) == 0
    assert reverse_number(-42) == 0


@pytest.mark.parametrize("n", NO_TRAILING_ZERO + [10, 500])
def test_count_digits_matches_text_length(n):
    assert count_digits(n) == len(str(n))


def test_count_digits_non_positive():
    assert count_digits(0) == 0
    assert count_digits(-5) == 0


@pytest.mark.parametrize("n", [153, 370, 371, 407, 9474])
def test_known_armstrong_numbers(n):
    assert armstrong_sum(n) == n
    assert is_armstrong(n)


@pytest.mark.parametrize("n", [10, 100, 154, 9475])
def test_non_armstrong_numbers(n):
    assert not is_armstrong(n)


@pytest.mark.parametrize("n", range(1, 10))
def test_single_digits_are_armstrong(n):
    assert is_armstrong(n)


@pytest.mark.parametrize("n", [0, 1, 9, 121, 12321, 4554])
def test_palindrome_numbers(n):
    assert is_palindrome_number(n)


@pytest.mark.parametrize("n", [10, 123, 4556, -121])
def test_non_palindrome_numbers(n):
    assert not is_palindrome_number(n)


@pytest.mark.parametrize("n", [2, 6, 12, 28, 30, 97, 360])
def test_divisors_agree_for_non_squares(n):
    assert divisors(n) == divisors_naive(n) + [n]


@pytest.mark.parametrize("n", [12, 36, 100, 360])
def test_divisors_all_divide(n):
    for d in divisors_naive(n) + divisors(n):
        assert n % d == 0


@pytest.mark.parametrize("n", [4, 16, 36, 49])
def test_divisors_omit_exact_root(n):
    root = math.isqrt(n)
    assert root not in divisors(n)
    assert root in divisors_naive(n)


@pytest.mark.parametrize("p", [2, 3, 5, 13, 29, 97])
def test_divisors_of_prime(p):
    assert divisors(p) == [1, p]


PAIRS = [(13, 29), (12, 18), (0, 7), (7, 0), (48, 180), (17, 17), (1, 99), (270, 192)]


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_variants_match_math_gcd(a, b):
    expected = math.gcd(a, b)
    assert gcd_bruteforce(a, b) == expected
    assert gcd_subtraction(a, b) == expected
    assert gcd_modulo(a, b) == expected


def test_gcd_bruteforce_takes_absolute_values():
    assert gcd_bruteforce(-12, 18) == math.gcd(12, 18)


def test_gcd_subtraction_rejects_negatives():
    with pytest.raises(ValueError):
        gcd_subtraction(-4, 6)


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 13, 29, 97, 7919])
def test_primes(p):
    assert is_prime(p)


@pytest.mark.parametrize("n", [4, 6, 9, 15, 25, 49, 7917])
def test_composites(n):
    assert not is_prime(n)


@pytest.mark.parametrize("n", range(4, 200))
def test_is_prime_agrees_with_naive_divisors(n):
    assert is_prime(n) == (divisors_naive(n) == [1])