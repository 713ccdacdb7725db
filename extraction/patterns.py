"""
Centralized patterns and lookups for the order printout.

- CATEGORY_LABELS: product categories that open a group ("Door:", "Drawer Front - Slab:").
- TERMINATOR_REGEX / TOTAL_ITEMS_REGEX: lines that end an item table.
- ITEM_ID_REGEX: what a real item row's first column looks like.
- RESERVED_COLUMN_NAMES: column captions that must never become metadata keys.

These live here so parsing rules stay readable and we change patterns in one place.
"""

import re
from typing import Iterable, Pattern


# Default categories. Add a label here (or via CHECKLIST_CATEGORY_LABELS) to
# recognize a new group header; the parser never hard-codes them.
CATEGORY_LABELS = ["Drawer Front", "Door", "End Panel"]

# Qualifier that may follow a category label, e.g. "Door - Slab:"
SLAB_QUALIFIER_REGEX = r"(?:\s+-\s+Slab)?"

# "Order Name: Smith Kitchen" (value must be on the same line)
ORDER_NAME_REGEX = r"(?i)Order Name:[ \t]*(.+)"

# Footer sections that close an item table
TERMINATOR_REGEX = r"(?i)^(?:Signature|Order Totals|Payment History|Notes|Powered By)"
TOTAL_ITEMS_REGEX = r"(?i)^Total Items"

# Old-style column header check used when peeking at metadata values
COLUMN_HEADER_REGEX = r"(?i)^ID\s+Qty"

# "12" or "3 1": one or two numeric tokens
ITEM_ID_REGEX = r"^\d+(?:\s+\d+)?$"

# Captions from the table header row
RESERVED_COLUMN_NAMES = {"ID", "Qty", "QTY", "Width", "Height", "Cab #", "Price", "Total"}

# An item row carries at least ID, Qty, Width, Height, Cab #
MIN_ITEM_FIELDS = 5


def build_group_header_pattern(labels: Iterable[str]) -> Pattern[str]:
    """Compile the group-header regex for a set of category labels.

    Longer labels go first so "Drawer Front" wins over a shorter prefix.
    """
    alts = sorted({lbl.strip() for lbl in labels if lbl and lbl.strip()}, key=len, reverse=True)
    if not alts:
        # nothing configured: a pattern that never matches
        return re.compile(r"(?!)")
    body = "|".join(re.escape(a) for a in alts)
    return re.compile(rf"^(?:{body}){SLAB_QUALIFIER_REGEX}:$", re.IGNORECASE)
