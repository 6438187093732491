# dsakit

A small library of classic algorithms, written as plain Python functions
with no third-party dependencies.

## Modules

### `dsakit.dynamic`

- `edit_distance(word1, word2)`: Levenshtein distance, where insertion,
  deletion and substitution each cost one.
- `longest_common_subsequence(text1, text2)`: length of the longest common
  subsequence of two sequences.
- `longest_increasing_subsequence(nums)`: length of the longest strictly
  increasing subsequence. An empty sequence gives 1.
- `longest_palindromic_subsequence(s)`: length of the longest palindromic
  subsequence.

### `dsakit.arrays`

- `merge_sorted(nums1, m, nums2, n)`: merges the sorted first `n` items of
  `nums2` into the sorted first `m` items of `nums1`, overwriting the first
  `m + n` slots of `nums1` and returning it. Raises `ValueError` for negative
  counts, counts longer than their sequence, or a `nums1` too short to hold
  the result.
- `reverse_array(items)`: reverses a mutable sequence in place and returns it.

### `dsakit.basic_math`

- `reverse_digits(n)`: the decimal text of `n`, reversed, as a string.
- `count_digits(n)`, `reverse_number(n)`: digit count and digit reversal of a
  positive integer; zero and negatives give 0.
- `armstrong_sum(n)`, `is_armstrong(n)`: sum of digits raised to the digit
  count, and whether `n` equals it.
- `is_palindrome_number(n)`: whether `n` equals its reversed digits.
- `divisors_naive(n)`: divisors from 1 to `n // 2`, ascending.
- `divisors(n)`: sorted pairs `i` and `n // i` for every `i` with `i * i < n`;
  an exact square root is not included.
- `gcd_bruteforce(a, b)`, `gcd_subtraction(a, b)`, `gcd_modulo(a, b)`: three
  ways to the greatest common divisor. `gcd_subtraction` raises `ValueError`
  for negative inputs.
- `is_prime(n)`: whether `n` has no divisor from 2 up to `n // 2`. Values
  below 4, including 0, 1 and negatives, are reported prime.

### `dsakit.hashing`

- `highest_frequency(values)`: `(value, count)` of the most frequent value,
  ties going to the smallest value; empty input raises `ValueError`.
- `frequency_table(values)`: dict of value to count, ordered by value.
- `char_counts(text)`: a `collections.Counter` of the characters in `text`.

### `dsakit.recursion`

- `is_palindrome(text)`: whether `text` reads the same both ways.
- `fibonacci(n)`: the `n`-th Fibonacci number with F(0) = 0 and F(1) = 1;
  negative `n` raises `ValueError`.
- `countdown(n)`: the printed trace of a recursion that writes `n ... 1` on
  the way down and each level's number after a newline on the way back.

### `dsakit.patterns`

Pattern functions return their rows as a list of strings: `square(c)`,
`right_triangle(c)`, `diamond(c)`, `alternating_binary()`,
`letter_countdown()`, `letter_repeat()`, `number_mirror()`, `letter_steps()`,
`hollow_butterfly()` and `butterfly()`. Functions taking `c` raise
`ValueError` unless it is a single character. `render_all(c)` joins every
pattern, with a banner line, into one text.

## Example

```python
from dsakit.dynamic import edit_distance
from dsakit.basic_math import gcd_modulo, is_armstrong
from dsakit.patterns import square

edit_distance("horse", "ros")   # 3
gcd_modulo(12, 18)              # 6
is_armstrong(153)               # True
square("#")                     # ['####', '####', '####', '####']
```

## Command line

Print every pattern built from one character:

```
dsakit-patterns '*'
```

The character is the first one of the first argument. With no argument, the
first non-blank character on standard input is used; if there is none, the
command prints an error and exits with status 1.

## Tests

```
pip install -e .[test]
pytest
```