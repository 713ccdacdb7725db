"""
Streamlit front-end for the door & drawer checklist.

- Accepts one pasted order printout (text area).
- Runs `parse_order()` -> `summarize()`.
- Shows the order name, each group's metadata and item table with a ✓ column,
  then the summary (total quantity + sorted cab numbers).
- Exposes CSV/JSON downloads of the parsed order.

Goal: stop ticking items off the shop printout by hand; print this page instead.
All processing happens locally.
"""

from __future__ import annotations

# --- ensure package imports work when launched directly ---
import sys, os
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import locale

import streamlit as st

# --- Internal modules ---
from checklist.core.config import settings
from checklist.services.parse_order import parse_order
from checklist.services.summarize import summarize
from checklist.services.export import group_to_dataframe, order_to_dataframe, order_to_json
from checklist.util.logger import get_logger

# cab # sorting collates with the user's locale
try:
    locale.setlocale(locale.LC_COLLATE, "")
except locale.Error as e:
    get_logger().warning(f"Locale from environment unavailable, cab # sort uses code-point order: {e}")

# ---------------------------- Page setup ----------------------------

st.set_page_config(page_title=settings.page_title, layout="wide")
st.title(settings.page_title)
st.caption("Paste an order → get a printable checklist per door/drawer group with a cab # summary.")

# ---------------------------- Sidebar help ----------------------------

with st.sidebar:
    st.header("How it works")
    st.markdown(
        "- Paste the whole order printout, tabs included.\n"
        "- Groups start at headers like `Door:` or `Drawer Front - Slab:`.\n"
        "- Metadata (key line, value line) sits above each item table.\n"
        "- Cab #s: CO-prefixed first, then the rest, case-insensitive."
    )
    st.divider()
    st.markdown("**Tip:** Use the browser's print dialog to print the checklist.")

# ---------------------------- Input ----------------------------

raw_text = st.text_area(
    "Paste your order text here:",
    height=260,
    placeholder="Paste the order text here...",
)

parse_btn = st.button("Parse", type="primary")

if parse_btn:
    st.session_state["record"] = parse_order(raw_text, categories=settings.category_labels)

record = st.session_state.get("record")

# ---------------------------- Display results ----------------------------

if record is None:
    st.info("Paste an order and click **Parse** to see the checklist.")
elif not record.groups:
    st.warning("No door or drawer groups found in the pasted text.")
else:
    if record.order_name:
        st.header(f"Order: {record.order_name}")

    for g_idx, group in enumerate(record.groups):
        st.subheader(group.category)

        if group.metadata:
            cols = st.columns(3)
            for m_idx, (key, value) in enumerate(group.metadata.items()):
                cols[m_idx % 3].markdown(f"**{key}:** {value}")

        df = group_to_dataframe(group).drop(columns=["category"])
        st.data_editor(
            df,
            key=f"group-{g_idx}",
            hide_index=True,
            use_container_width=True,
            disabled=[c for c in df.columns if c != "checked"],
            column_config={
                "id": "ID",
                "qty": "QTY",
                "width": "Width",
                "height": "Height",
                "cab_no": "Cab # no commas",
                "additional_info": "Notes",
                "checked": st.column_config.CheckboxColumn("✓"),
            },
        )

    summary = summarize(record)

    st.markdown("## Summary")
    st.markdown(f"**Total Quantity: {summary.total_quantity}**")
    st.markdown("### cabinet doors and drawers included:")
    st.markdown(" ".join(f"`{cab}`" for cab in summary.cab_numbers))

    col_dl1, col_dl2 = st.columns(2)
    file_stem = (record.order_name or "order").replace(" ", "_")
    with col_dl1:
        st.download_button(
            "Download JSON",
            data=order_to_json(record, summary),
            file_name=f"{file_stem}.json",
            mime="application/json",
            use_container_width=True
        )
    with col_dl2:
        st.download_button(
            "Download CSV",
            data=order_to_dataframe(record).to_csv(index=False),
            file_name=f"{file_stem}.csv",
            mime="text/csv",
            use_container_width=True
        )
