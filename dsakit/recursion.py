"""Small recursive classics: palindromes, Fibonacci and a countdown trace."""


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same forwards and backwards."""
    half = len(text) // 2
    return all(a == b for a, b in zip(text[:half], reversed(text[-half:] if half else "")))


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def countdown(n: int) -> str:
    """Return the trace of a recursion that prints on the way down and back up.

    Going down it writes ``n n-1 ... 1 `` on one line; unwinding, each level
    writes a newline and then its own number.
    """
    if n <= 0:
        return ""
    down = "".join(f"{k} " for k in range(n, 0, -1))
    up = "".join(f"\n{k} " for k in range(1, n + 1))
    return down + up