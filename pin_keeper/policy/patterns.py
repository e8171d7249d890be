"""Pattern detection over PIN digit strings.

Both checks are pure and total over any non-empty digit string.
"""


def is_sequential(pin: str) -> bool:
    """Return True if the digits step consistently by +1 or by -1.

    A single non-conforming pair disqualifies that direction. Strings of
    length 1 or 2 trivially satisfy one direction, so callers must gate
    short inputs on length separately.

    Parameters
    ----------
    pin : str
        Digit string.

    Returns
    -------
    bool
        True for ascending runs like ``"3456"`` or descending ones like ``"9876"``.
    """
    ascending = True
    descending = True
    for prev, cur in zip(pin, pin[1:]):
        step = int(cur) - int(prev)
        if step != 1:
            ascending = False
        if step != -1:
            descending = False
        if not ascending and not descending:
            return False
    return ascending or descending


def has_too_many_repeats(pin: str) -> bool:
    """Return True if 3+ identical digits are adjacent or all digits are equal.

    The all-equal check covers short strings (``"77"``) that a run-of-three
    test alone would miss.
    """
    run = 1
    for prev, cur in zip(pin, pin[1:]):
        if cur == prev:
            run += 1
            if run >= 3:
                return True
        else:
            run = 1
    return len(set(pin)) == 1


def is_digit_string(value: str) -> bool:
    """True for a non-empty string of ASCII digits 0-9."""
    return bool(value) and all(ch in "0123456789" for ch in value)
