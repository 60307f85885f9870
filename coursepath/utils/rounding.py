import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up (12.5 -> 13).

    Python's round() uses banker's rounding (12.5 -> 12), which would
    disagree with percentages shown by the frontend.
    """
    return int(math.floor(value + 0.5))
