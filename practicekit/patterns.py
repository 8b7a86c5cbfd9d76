"""Text patterns drawn with asterisks, digits and characters."""

from __future__ import annotations

__all__ = [
    "hollow_square",
    "filled_square",
    "number_triangle",
    "reverse_triangle",
    "right_triangle",
    "mirrored_pyramid",
]

_STAR = "* "
_BLANK = "  "


def _lines(rows) -> str:
    return "".join(f"{row}\n" for row in rows)


def hollow_square(size: int) -> str:
    """Return the outline of a ``size`` by ``size`` square of asterisks."""

    def row(r: int) -> str:
        if r in (0, size - 1):
            return _STAR * size
        return "".join(
            _STAR if c in (0, size - 1) else _BLANK for c in range(size)
        )

    return _lines(row(r) for r in range(size))


def filled_square(size: int) -> str:
    """Return a solid ``size`` by ``size`` square of asterisks."""
    return _lines(_STAR * size for _ in range(size))


def number_triangle(size: int) -> str:
    """Return a triangle whose n-th row repeats the number n, n times."""
    return _lines(f"{n} " * n for n in range(1, size + 1))


def reverse_triangle(size: int) -> str:
    """Return a triangle of asterisks that shrinks by one per row."""
    return _lines(_STAR * n for n in range(size, 0, -1))


def right_triangle(size: int) -> str:
    """Return a right-angled triangle of asterisks that grows by one per row."""
    return _lines(_STAR * n for n in range(1, size + 1))


def mirrored_pyramid(text: str) -> str:
    """Return a pyramid whose rows are growing prefixes of ``text`` mirrored."""
    length = len(text)
    return _lines(
        " " * (length - i) + text[:i] + text[: i - 1][::-1]
        for i in range(1, length + 1)
    )