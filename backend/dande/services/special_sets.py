"""
Special number groups
- "Bo" table: every number belongs to exactly one group built from its digits and their shadows
- Quick groups: named categories over digit parity, magnitude, sum and doubles
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from dande.services.number_universe import (
    ALL_NUMBERS,
    digit_magnitude,
    digit_parity,
    format_number,
    is_double,
    raw_digit_sum,
    sort_numbers,
    tens_digit,
    units_digit,
)

# Shadow digit pairs: 0-5, 1-6, 2-7, 3-8, 4-9
SHADOW_OFFSET = 5


def shadow_digit(digit: int) -> int:
    return (digit + SHADOW_OFFSET) % 10


def _bo_members(number: str) -> Tuple[str, ...]:
    """All numbers built from {a, shadow(a)} x {b, shadow(b)} in either order"""
    a, b = tens_digit(number), units_digit(number)
    firsts = {a, shadow_digit(a)}
    seconds = {b, shadow_digit(b)}
    members = set()
    for x in firsts:
        for y in seconds:
            members.add(format_number(x * 10 + y))
            members.add(format_number(y * 10 + x))
    return tuple(sort_numbers(members))


# id -> members; any of the 100 numbers is a valid id
SPECIAL_SETS: Dict[str, Tuple[str, ...]] = {n: _bo_members(n) for n in ALL_NUMBERS}


def get_special_set(set_id: str) -> List[str]:
    """
    Members of the special group identified by set_id
    Raises KeyError for unknown ids
    """
    if set_id not in SPECIAL_SETS:
        raise KeyError(f"Unknown special set: {set_id}")
    return list(SPECIAL_SETS[set_id])


def get_combined_special_set_numbers(set_ids: List[str]) -> List[str]:
    """Union of several special groups, deduplicated and sorted"""
    combined = set()
    for set_id in set_ids:
        combined.update(get_special_set(set_id))
    return sort_numbers(combined)


def canonical_special_sets() -> Dict[str, List[str]]:
    """
    The distinct groups keyed by their smallest member
    15 groups: 5 of size 4 and 10 of size 8
    """
    groups: Dict[str, List[str]] = {}
    for members in SPECIAL_SETS.values():
        groups.setdefault(members[0], list(members))
    return groups


@dataclass(frozen=True)
class QuickGroup:
    """Named category of numbers"""
    key: str
    label: str
    numbers: Tuple[str, ...]


def _select(predicate: Callable[[str], bool]) -> Tuple[str, ...]:
    return tuple(n for n in ALL_NUMBERS if predicate(n))


_NEAR_DOUBLES = ("01", "10", "12", "21", "23", "32", "34", "43", "45", "54",
                 "56", "65", "67", "76", "78", "87", "89", "98")

_QUICK_GROUP_DEFINITIONS: List[Tuple[str, str, Callable[[str], bool]]] = [
    # Head (tens digit)
    ("head-even", "Đầu chẵn", lambda n: digit_parity(tens_digit(n)) == "even"),
    ("head-odd", "Đầu lẻ", lambda n: digit_parity(tens_digit(n)) == "odd"),
    ("head-small", "Đầu bé", lambda n: digit_magnitude(tens_digit(n)) == "small"),
    ("head-big", "Đầu lớn", lambda n: digit_magnitude(tens_digit(n)) == "big"),
    # Tail (units digit)
    ("tail-even", "Đuôi chẵn", lambda n: digit_parity(units_digit(n)) == "even"),
    ("tail-odd", "Đuôi lẻ", lambda n: digit_parity(units_digit(n)) == "odd"),
    ("tail-small", "Đuôi bé", lambda n: digit_magnitude(units_digit(n)) == "small"),
    ("tail-big", "Đuôi lớn", lambda n: digit_magnitude(units_digit(n)) == "big"),
    # Raw digit sum
    ("sum-even", "Tổng chẵn", lambda n: raw_digit_sum(n) % 2 == 0),
    ("sum-odd", "Tổng lẻ", lambda n: raw_digit_sum(n) % 2 == 1),
    ("sum-small", "Tổng bé", lambda n: raw_digit_sum(n) < 9),
    ("sum-big", "Tổng lớn", lambda n: raw_digit_sum(n) >= 9),
    # Parity pairs
    ("even-even", "Chẵn/Chẵn", lambda n: tens_digit(n) % 2 == 0 and units_digit(n) % 2 == 0),
    ("even-odd", "Chẵn/Lẻ", lambda n: tens_digit(n) % 2 == 0 and units_digit(n) % 2 == 1),
    ("odd-even", "Lẻ/Chẵn", lambda n: tens_digit(n) % 2 == 1 and units_digit(n) % 2 == 0),
    ("odd-odd", "Lẻ/Lẻ", lambda n: tens_digit(n) % 2 == 1 and units_digit(n) % 2 == 1),
    # Magnitude pairs
    ("small-small", "Bé/Bé", lambda n: tens_digit(n) < 5 and units_digit(n) < 5),
    ("small-big", "Bé/Lớn", lambda n: tens_digit(n) < 5 and units_digit(n) >= 5),
    ("big-small", "Lớn/Bé", lambda n: tens_digit(n) >= 5 and units_digit(n) < 5),
    ("big-big", "Lớn/Lớn", lambda n: tens_digit(n) >= 5 and units_digit(n) >= 5),
    # Doubles
    ("double", "Kép bằng", is_double),
    ("near-double", "Kép lệch", lambda n: n in _NEAR_DOUBLES),
    ("shadow-double", "Kép âm", lambda n: raw_digit_sum(n) == 10),
    ("adjacent-double", "Sát kép", lambda n: n in _NEAR_DOUBLES),
]

QUICK_GROUPS: Dict[str, QuickGroup] = {
    key: QuickGroup(key=key, label=label, numbers=_select(predicate))
    for key, label, predicate in _QUICK_GROUP_DEFINITIONS
}


def get_quick_group(key: str) -> QuickGroup:
    """Raises KeyError for unknown group keys"""
    if key not in QUICK_GROUPS:
        raise KeyError(f"Unknown group: {key}")
    return QUICK_GROUPS[key]
