"""Text patterns built from characters, digits and letters.

Each pattern function returns its rows as a list of strings; trailing spaces
that belong to a row are kept.
"""

from __future__ import annotations

import string
import sys
from collections.abc import Sequence

BANNER = "NNNNNNNNNNNNNNNNNNNNEEEEEEEEEEEEEEEEEEWWWWWWWWWWWWWWWWW"

_LETTERS = string.ascii_uppercase


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("pattern character must be a single character")
    return c


def square(c: str) -> list[str]:
    """A 4 by 4 block of ``c``."""
    _check_char(c)
    return [c * 4 for _ in range(4)]


def right_triangle(c: str) -> list[str]:
    """Five rows of ``c`` growing from one to five characters."""
    _check_char(c)
    return [c * width for width in range(1, 6)]


def diamond(c: str) -> list[str]:
    """A padded diamond nine characters wide, with the widest row twice."""
    _check_char(c)
    top = []
    for width in range(1, 10, 2):
        pad = " " * ((9 - width) // 2)
        top.append(pad + c * width + pad)
    bottom = []
    for offset, width in enumerate(range(9, 0, -2)):
        pad = " " * offset
        bottom.append(pad + c * width + pad)
    return top + bottom


def alternating_binary() -> list[str]:
    """Five rows of alternating 0 and 1; even rows start with 1."""
    rows = []
    for length in range(1, 6):
        start = 1 if length % 2 == 0 else 0
        rows.append("".join(str((start + k) % 2) for k in range(length)))
    return rows


def letter_countdown() -> list[str]:
    """Rows of leading letters shrinking from five to two."""
    return [_LETTERS[: 5 - i] for i in range(4)]


def letter_repeat() -> list[str]:
    """Row ``i`` repeats the ``i``-th letter ``i`` times, for five rows."""
    return [_LETTERS[i] * (i + 1) for i in range(5)]


def number_mirror() -> list[str]:
    """Counting up and back down with a shrinking gap between, four rows."""
    rows = []
    for i in range(1, 5):
        up = "".join(str(j) for j in range(1, i + 1))
        rows.append(up + " " * (8 - 2 * i) + up[::-1])
    return rows


def letter_steps() -> list[str]:
    """Growing runs of leading letters, padded by three spaces on each side."""
    pad = " " * 3
    return [pad + _LETTERS[:i] + pad for i in range(1, 5)]


def hollow_butterfly() -> list[str]:
    """Ten rows of two star blocks pushed apart by a widening gap."""
    rows = []
    for i in range(10):
        stars = "*" * max(5 - i, 0)
        rows.append(stars + " " * (2 * i) + stars)
    return rows


def butterfly() -> list[str]:
    """Two star wings meeting in the middle, ten characters wide."""
    rows = []
    for i in range(1, 6):
        rows.append("*" * i + " " * (10 - 2 * i) + "*" * i)
    for i in range(1, 5):
        wing = "*" * (5 - i)
        rows.append(wing + " " * (2 * i) + wing)
    return rows


def render_all(c: str) -> str:
    """Render every pattern in order, one row per line, as a single text."""
    _check_char(c)
    rows: list[str] = []
    rows += square(c)
    rows += right_triangle(c)
    rows += diamond(c)
    rows += alternating_binary()
    rows += letter_countdown()
    rows += letter_repeat()
    rows += number_mirror()
    rows += letter_steps()
    rows += hollow_butterfly()
    rows += [BANNER, ""]
    rows += butterfly()
    return "".join(row + "\n" for row in rows)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a pattern character and print every pattern with it.

    The character is the first one of the first argument, or else the first
    non-blank character on standard input.
    """
    if argv is None:
        argv = sys.argv[1:]
    if argv and argv[0]:
        c = argv[0][0]
    else:
        text = sys.stdin.read().lstrip()
        if not text:
            print("no pattern character given", file=sys.stderr)
            return 1
        c = text[0]
    sys.stdout.write(render_all(c))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())