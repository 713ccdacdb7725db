"""
Data shapes for the order parser.

- Item: one row of a group's item table (id/qty/width/height/cab_no + annotations).
- Group: one category block ("Door", "Drawer Front - Slab") with metadata and items.
- OrderRecord: per-order wrapper with the order name and the groups in text order.
- OrderSummary: checklist totals derived from the groups.

Everything is frozen: a parse builds fresh objects and nobody edits them afterwards.
Sequences are tuples and group metadata is a read-only mapping, so the
containers can't be edited either.
If I need a new output column, I add it to `Item` here first and then populate it
in `parse_order.py`.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Item(BaseModel):
    """
    One door/drawer/panel row.

    All fields stay as the text that was printed. Dimensions like "15 1/2"
    must round-trip unchanged, so nothing here is a number.

    - additional_info: trailing annotation lines ("Hinge Drilling: Pair"),
      joined with "; " when there is more than one
    """

    model_config = ConfigDict(frozen=True)

    id: str
    qty: str
    width: str
    height: str
    cab_no: str
    additional_info: str = ""


class Group(BaseModel):
    """
    One product category block.

    - category: header text without the trailing colon ("Door - Slab")
    - metadata: key/value pairs printed above the table (wood type, hinge spec),
      in the order they appeared
    - items: rows of the table; a group is only ever returned with at least one
    """

    model_config = ConfigDict(frozen=True)

    category: str
    metadata: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    items: Tuple[Item, ...] = ()

    @field_validator("metadata")
    @classmethod
    def _read_only_metadata(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_serializer("metadata")
    def _dump_metadata(self, v: Mapping[str, str]) -> Dict[str, str]:
        return dict(v)


class OrderRecord(BaseModel):
    """Final output for one pasted order."""

    model_config = ConfigDict(frozen=True)

    order_name: str = ""
    groups: Tuple[Group, ...] = ()


class OrderSummary(BaseModel):
    """
    Checklist footer.

    - total_quantity: sum of item quantities (unreadable quantities count as 0)
    - cab_numbers: distinct cabinet numbers, CO-prefixed first
    """

    model_config = ConfigDict(frozen=True)

    total_quantity: int = 0
    cab_numbers: List[str] = Field(default_factory=list)
