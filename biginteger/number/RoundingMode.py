from enum import IntEnum


class RoundingMode(IntEnum):
    """Rounding applied to the quotient of an integer division.

    Values match the GMP rounding constants so plain integers can be passed.
    """

    TRUNCATE = 0  # toward zero
    CEIL = 1  # toward +inf
    FLOOR = 2  # toward -inf
