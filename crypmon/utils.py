"""Helper utility functions and constants.
"""

# rule value for "any status"; every negative rule value is treated the same
WILDCARD = -1

DEFAULT_MESSAGE_SPACE_BITS = 8

def bits(x):
    """Iterate over the binary digits of `x`, least significant first.

    Parameters
    ----------
    x : int
        non-negative integer

    Yields
    ------
    int
        0 or 1
    """
    while x > 0:
        yield x & 1
        x >>= 1

def is_wildcard(v):
    return v < 0

def check_non_negative(name, value):
    """Raise `ValueError` unless `value` is an int >= 0."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("{} must be an integer, got {!r}".format(name, value))
    if value < 0:
        raise ValueError("{} must be non-negative, got {}".format(name, value))
