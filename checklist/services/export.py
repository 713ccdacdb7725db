"""
Flatten a parsed order for tables and downloads.

- item_to_row / rows_to_dataframe: one row per item, fixed column order, with
  an unchecked "checked" column for the printed checklist.
- order_to_json: order + summary as indented JSON.
"""

import json
from typing import Any, Dict, List, Optional

import pandas as pd

from checklist.models.schemas import Group, Item, OrderRecord, OrderSummary

ROW_COLUMNS = [
    "category", "id", "qty", "width", "height", "cab_no",
    "additional_info", "checked",
]


def item_to_row(group: Group, item: Item) -> Dict[str, Any]:
    return {
        "category": group.category,
        "id": item.id,
        "qty": item.qty,
        "width": item.width,
        "height": item.height,
        "cab_no": item.cab_no,
        "additional_info": item.additional_info,
        "checked": False,
    }


def rows_to_dataframe(rows: List[Dict[str, Any]]) -> pd.DataFrame:
    df = pd.DataFrame(rows)
    for c in ROW_COLUMNS:
        if c not in df.columns:
            df[c] = None
    return df[ROW_COLUMNS]


def group_to_dataframe(group: Group) -> pd.DataFrame:
    return rows_to_dataframe([item_to_row(group, it) for it in group.items])


def order_to_dataframe(record: OrderRecord) -> pd.DataFrame:
    """Every item of every group, in text order."""
    rows = [item_to_row(g, it) for g in record.groups for it in g.items]
    return rows_to_dataframe(rows)


def order_to_json(record: OrderRecord, summary: Optional[OrderSummary] = None) -> str:
    blob: Dict[str, Any] = {"order": record.model_dump()}
    if summary is not None:
        blob["summary"] = summary.model_dump()
    return json.dumps(blob, indent=2)
