# checklist/services/parse_order.py
"""
Parsing rules for a pasted shop order printout:

- Order name: "Order Name: <text>" anywhere in the text (value on the same line).

- Group headers open a category block:
    Drawer Front:
    Drawer Front - Slab:
    Door:
    End Panel:
  The label list is configurable; see extraction/patterns.py.

- Metadata sits between the header and the table, key on one line and value
  on the NEXT line:
    Wood Type:
    Maple
    Cabinet Door Hinge Drilling:
    4" on center

- Item table starts at the tab-separated column header
    ID<TAB>Qty<TAB>Width<TAB>Height<TAB>Cab # no commas<TAB><TAB>Price<TAB>Total
  and runs until the next group header, "Total Items", or a footer section
  (Signature, Order Totals, Payment History, Notes, Powered By). The stop line
  is left for the main loop.
    * Rows: first five non-empty tab fields = id, qty, width, height, cab_no.
      Price/Total columns are dropped.
    * The id must look like "12" or "3 1"; otherwise a row with a colon is an
      annotation for the previous item.
    * Tab-free lines with a colon right after a row ("Hinge Drilling: Pair",
      "Panels Wide: 2") are annotations for that row.

- Groups without items are dropped. Lines matching nothing are skipped.

Walks an explicit cursor over the stripped lines so lookahead/backup stays
visible. Nothing here raises on odd input; the worst case is an empty record.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Pattern

from checklist.models.schemas import Group, Item, OrderRecord
from extraction.patterns import (
    CATEGORY_LABELS,
    COLUMN_HEADER_REGEX,
    ITEM_ID_REGEX,
    MIN_ITEM_FIELDS,
    ORDER_NAME_REGEX,
    RESERVED_COLUMN_NAMES,
    TERMINATOR_REGEX,
    TOTAL_ITEMS_REGEX,
    build_group_header_pattern,
)
from checklist.util.logger import get_logger

# ---------- regexes / helpers ----------

order_name_pat = re.compile(ORDER_NAME_REGEX)
TERMINATOR_PAT = re.compile(TERMINATOR_REGEX)
TOTAL_ITEMS_PAT = re.compile(TOTAL_ITEMS_REGEX)
COLUMN_HEADER_PAT = re.compile(COLUMN_HEADER_REGEX)
ITEM_ID_PAT = re.compile(ITEM_ID_REGEX)

DEFAULT_GROUP_HEADER_PAT = build_group_header_pattern(CATEGORY_LABELS)

ANNOTATION_SEP = "; "


@dataclass
class _GroupDraft:
    """Open group while the cursor is inside it; frozen into a Group on close."""

    category: str
    metadata: Dict[str, str] = field(default_factory=dict)
    items: List[Item] = field(default_factory=list)

    def annotate_last(self, text: str) -> bool:
        """Append an annotation to the newest item. False if there is none yet."""
        if not self.items:
            return False
        last = self.items[-1]
        info = f"{last.additional_info}{ANNOTATION_SEP}{text}" if last.additional_info else text
        self.items[-1] = last.model_copy(update={"additional_info": info})
        return True

    def freeze(self) -> Group:
        return Group(category=self.category, metadata=dict(self.metadata), items=list(self.items))


def split_lines(text: str) -> List[str]:
    """Split on newlines and trim every line (CR, tabs and spaces at the ends)."""
    if not text:
        return []
    return [ln.strip() for ln in text.split("\n")]


def extract_order_name(text: str) -> str:
    """'Order Name:  Smith Kitchen' -> 'Smith Kitchen'; '' when absent."""
    if not text:
        return ""
    m = order_name_pat.search(text)
    return m.group(1).strip() if m else ""


def is_group_header(line: str, header_pat: Pattern[str] = DEFAULT_GROUP_HEADER_PAT) -> bool:
    return bool(header_pat.match(line))


def is_table_header(line: str) -> bool:
    """Column header row: ID + Qty/QTY + Width, tab separated."""
    return (
        "ID" in line
        and ("Qty" in line or "QTY" in line)
        and "Width" in line
        and "\t" in line
    )


def is_total_items(line: str) -> bool:
    return bool(TOTAL_ITEMS_PAT.match(line))


def is_terminator(line: str, header_pat: Pattern[str] = DEFAULT_GROUP_HEADER_PAT) -> bool:
    """Lines that end an item table (and are not consumed by it)."""
    return is_group_header(line, header_pat) or is_total_items(line) or bool(TERMINATOR_PAT.match(line))


def split_item_fields(line: str) -> List[str]:
    """Tab split, trimmed, empty columns dropped."""
    return [p.strip() for p in line.split("\t") if p.strip()]


def looks_like_item_id(value: str) -> bool:
    return bool(ITEM_ID_PAT.match(value.strip()))


def is_annotation_line(line: str, header_pat: Pattern[str] = DEFAULT_GROUP_HEADER_PAT) -> bool:
    """'Hinge Drilling: Pair' style follow-up line for the row above it."""
    return ":" in line and "\t" not in line and not is_terminator(line, header_pat)


def metadata_key(line: str) -> Optional[str]:
    """'Wood Type:' -> 'Wood Type'; None for non-keys and column captions."""
    if not line.endswith(":"):
        return None
    key = line[:-1].strip()
    if not key or key in RESERVED_COLUMN_NAMES:
        return None
    return key


def is_metadata_value(line: str, header_pat: Pattern[str] = DEFAULT_GROUP_HEADER_PAT) -> bool:
    """Can this line be the value under a metadata key?"""
    if not line or "\t" in line:
        return False
    if is_group_header(line, header_pat) or is_total_items(line):
        return False
    if is_table_header(line) or COLUMN_HEADER_PAT.match(line):
        return False
    return True


def scan_items(lines: List[str], start: int, draft: _GroupDraft, header_pat: Pattern[str]) -> int:
    """
    Read item rows from `start` (first line after the column header).

    Returns the index of the stop line (or len(lines)); that line is left
    for the caller to process.
    """
    i = start
    n = len(lines)
    while i < n:
        line = lines[i]

        if is_terminator(line, header_pat):
            break

        if not line:
            i += 1
            continue

        parts = split_item_fields(line)
        if len(parts) < MIN_ITEM_FIELDS:
            i += 1
            continue

        if not looks_like_item_id(parts[0]):
            # "Hinge Drilling:\tLeft\t..." style row -> note on the previous item
            if ":" in line:
                draft.annotate_last(line)
            i += 1
            continue

        draft.items.append(Item(
            id=parts[0],
            qty=parts[1],
            width=parts[2],
            height=parts[3],
            cab_no=parts[4],
        ))

        # annotations printed right under the row
        while i + 1 < n and is_annotation_line(lines[i + 1], header_pat):
            draft.annotate_last(lines[i + 1])
            i += 1

        i += 1

    return i


# ---------- main entry ----------

def parse_order(text: str, categories: Optional[Iterable[str]] = None) -> OrderRecord:
    """
    Turn a pasted order printout into an OrderRecord.

    Args:
        text: the whole printout, newline separated, tab separated inside tables.
        categories: group header labels; defaults to extraction.patterns.CATEGORY_LABELS.

    Returns:
        OrderRecord: order name plus the non-empty groups in text order.
    """
    logger = get_logger()
    header_pat = DEFAULT_GROUP_HEADER_PAT if categories is None else build_group_header_pattern(categories)

    text = text or ""
    lines = split_lines(text)
    logger.info(f"Starting order parse: {len(lines)} lines")

    order_name = extract_order_name(text)
    groups: List[Group] = []
    current: Optional[_GroupDraft] = None

    def close(draft: Optional[_GroupDraft]) -> None:
        if draft is not None and draft.items:
            groups.append(draft.freeze())

    i = 0
    n = len(lines)
    while i < n:
        line = lines[i]

        # New category block
        if is_group_header(line, header_pat):
            close(current)
            current = _GroupDraft(category=line[:-1].strip())
            i += 1
            continue

        if current is None:
            i += 1
            continue

        # Column header -> item rows
        if is_table_header(line):
            i = scan_items(lines, i + 1, current, header_pat)
            if current.items:
                close(current)
                current = None
            # stop line gets reprocessed on the next pass
            continue

        # Metadata key with value on the next line
        key = metadata_key(line)
        if key is not None and i + 1 < n and is_metadata_value(lines[i + 1], header_pat):
            current.metadata[key] = lines[i + 1]
            i += 2
            continue

        i += 1

    close(current)

    logger.info(f"Parsed order '{order_name}': {len(groups)} groups")
    logger.debug(f"Items per group: {[(g.category, len(g.items)) for g in groups]}")

    return OrderRecord(order_name=order_name, groups=groups)
