"""Numeric range tables that parameterize primitive and array type validity."""


def inclusive_range(minimum: int, maximum: int, step: int = 1) -> tuple[int, ...]:
    """All integers in [minimum, maximum], ascending. Raises ValueError for an empty or negative range."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    if minimum < 0:
        raise ValueError(f"range minimum must be >= 0, got {minimum}")
    if minimum > maximum:
        raise ValueError(f"range minimum {minimum} exceeds maximum {maximum}")
    return tuple(range(minimum, maximum + 1, step))


# bytes<M>: 0 < M <= 32
BYTE_WIDTHS: tuple[int, ...] = inclusive_range(1, 32)

# (u)int<M>: 0 < M <= 256, M % 8 == 0
BIT_WIDTHS: tuple[int, ...] = inclusive_range(8, 256, step=8)

DEFAULT_INT_BITS = 256
