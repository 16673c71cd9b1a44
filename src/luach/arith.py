"""Floor division helpers for calendar arithmetic on negative day and year counts."""


def floor_divmod(n: int, m: int) -> tuple[int, int]:
    """Return ``(q, r)`` with ``n == q * m + r`` and ``0 <= r < m``.

    Raises:
        ValueError: If ``m`` is not positive.
    """
    if m <= 0:
        raise ValueError(f"divisor must be positive, got {m}")
    return divmod(n, m)


def floor_div(n: int, m: int) -> int:
    return floor_divmod(n, m)[0]


def floor_mod(n: int, m: int) -> int:
    return floor_divmod(n, m)[1]
