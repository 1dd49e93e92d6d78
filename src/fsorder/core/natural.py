from __future__ import annotations

"""
Natural Order Comparator.

Orders path strings the way a person reads them: embedded digit runs are
compared by magnitude and letters are compared without regard to ASCII
case. At any position a digit sorts before a non-digit, and a string that
runs out first sorts before the longer one.

The comparison is expressed as a sort key so that `less`, `compare` and
`sorted()` share a single iterative scan of each input.
"""

from typing import Iterable, List, Tuple

from fsorder.domain.constants import NUMERIC_SATURATION
from fsorder.domain.paths import PathInput, to_native_path

NaturalKey = Tuple[Tuple[int, int], ...]

# Token classes; digit runs rank ahead of any other character.
_NUMBER = 0
_CHAR = 1

_ORD_0 = ord("0")
_ORD_9 = ord("9")
_ORD_A_LOWER = ord("a")
_ORD_Z_LOWER = ord("z")
_CASE_OFFSET = ord("a") - ord("A")


# ==============================================================================
# PUBLIC API
# ==============================================================================

def natural_key(text: PathInput) -> NaturalKey:
    """
    Build the natural-order sort key of a path.

    Each maximal run of ASCII digits becomes one numeric token whose value
    saturates at NUMERIC_SATURATION; every other character becomes one
    token holding its ASCII upper-cased code point.

    Args:
        text: Path string, bytes or path-like object.

    Returns:
        NaturalKey: Tuple of (class, value) tokens, comparable with `<`.

    Example:
        >>> sorted(["file10.png", "File2.png"], key=natural_key)
        ['File2.png', 'file10.png']
    """
    s = to_native_path(text)
    tokens: List[Tuple[int, int]] = []
    i = 0
    n = len(s)

    while i < n:
        code = ord(s[i])
        if _ORD_0 <= code <= _ORD_9:
            value = 0
            while i < n and _ORD_0 <= ord(s[i]) <= _ORD_9:
                if value < NUMERIC_SATURATION:
                    value = min(value * 10 + (ord(s[i]) - _ORD_0), NUMERIC_SATURATION)
                i += 1
            tokens.append((_NUMBER, value))
            continue

        if _ORD_A_LOWER <= code <= _ORD_Z_LOWER:
            code -= _CASE_OFFSET
        tokens.append((_CHAR, code))
        i += 1

    return tuple(tokens)


def less(a: PathInput, b: PathInput) -> bool:
    """
    Return True when `a` sorts strictly before `b` in natural order.

    The relation is a strict weak ordering: never true for equal inputs
    and transitive across any set of paths.
    """
    return natural_key(a) < natural_key(b)


def compare(a: PathInput, b: PathInput) -> int:
    """Three-way natural comparison returning -1, 0 or 1."""
    ka = natural_key(a)
    kb = natural_key(b)
    if ka < kb:
        return -1
    if kb < ka:
        return 1
    return 0


def natural_sort(items: Iterable[str]) -> List[str]:
    """
    Sort strings in natural order.

    The sort is stable, so entries the comparator treats as equivalent
    (e.g. "a01" and "a1") keep their input order.

    Args:
        items: Strings to order.

    Returns:
        List[str]: New list in natural order.
    """
    return sorted(items, key=natural_key)

