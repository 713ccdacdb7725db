"""
Post-processing for a parsed order: the checklist footer.

- Total: sum of item quantities. A quantity that doesn't read as a number
  counts as 0 for that item only.
- Cab numbers: de-dupe exactly (case-sensitive), then sort.
- Sort rule: "CO..." (letter O) before everything else ("C0..." with a zero,
  anything else), then case-insensitive within each class. A plain sort would
  interleave CO12 and C012, which the shop reads as different cabinet runs.

This runs after `parse_order()` and before we show/export results.
"""

import locale
import re
from typing import Iterable, List, Tuple, Union

from checklist.models.schemas import Group, OrderRecord, OrderSummary
from checklist.util.logger import get_logger

LEADING_INT_PAT = re.compile(r"^\s*([+-]?\d+)")


def parse_quantity(qty: str) -> int:
    """'3' -> 3, ' 2 pcs' -> 2; anything unreadable -> 0."""
    if not qty:
        return 0
    m = LEADING_INT_PAT.match(qty)
    return int(m.group(1)) if m else 0


def _groups_of(source: Union[OrderRecord, Iterable[Group]]) -> List[Group]:
    if isinstance(source, OrderRecord):
        return list(source.groups)
    return list(source or [])


def total_quantity(groups: Iterable[Group]) -> int:
    return sum(parse_quantity(item.qty) for g in groups for item in g.items)


def is_co_class(cab_no: str) -> bool:
    """Second character is the letter O (CO12), not a zero (C012)."""
    return len(cab_no) >= 2 and cab_no[1].upper() == "O"


def cab_number_sort_key(cab_no: str) -> Tuple[int, str, str]:
    """
    (class, collated uppercase, raw).

    Collation follows the process LC_COLLATE (the Streamlit app sets it from
    the environment; otherwise it is the C locale, i.e. code-point order).
    strxfrm rejects NUL, so those are dropped from the collation part only.
    The raw value breaks ties between case variants ("co1" vs "CO1").
    """
    upper = cab_no.upper().replace("\x00", "")
    return (0 if is_co_class(cab_no) else 1, locale.strxfrm(upper), cab_no)


def unique_sorted_cab_numbers(groups: Iterable[Group]) -> List[str]:
    """Distinct cab numbers in first-seen order, then sorted with cab_number_sort_key."""
    seen = dict.fromkeys(item.cab_no for g in groups for item in g.items)
    return sorted(seen, key=cab_number_sort_key)


def summarize(source: Union[OrderRecord, Iterable[Group]]) -> OrderSummary:
    """Total quantity + sorted unique cab numbers for an order (or just its groups)."""
    logger = get_logger()
    groups = _groups_of(source)

    total = total_quantity(groups)
    cabs = unique_sorted_cab_numbers(groups)

    logger.info(f"Summary: total quantity {total}, {len(cabs)} unique cab numbers")
    logger.debug(f"Cab order: {cabs}")
    return OrderSummary(total_quantity=total, cab_numbers=cabs)
