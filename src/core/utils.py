# core/utils.py

EPSILON = 1e-5

def float_is_equal(a: float, b: float) -> bool:
    """
    Returns True if a and b differ by less than EPSILON.
    """
    return abs(a - b) < EPSILON

def clamp(lower, higher, value):
    """
    Limits value to the inclusive range [lower, higher].
    """
    if value > higher:
        return higher
    if value < lower:
        return lower
    return value

def is_within_range(lower, higher, value) -> bool:
    """
    Returns True if lower <= value <= higher.
    """
    return not (value > higher or value < lower)
