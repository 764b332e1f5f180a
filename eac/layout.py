# eac/layout.py
"""
Structural assumptions about the saved Schwab Employee Awards Center
"History & Statements" page. Every tag path the converter walks lives here,
so a change in Schwab's markup touches this file only.

A chain is a sequence of (step, tag) pairs, where step is CHILD (first child
with that tag) or SIBLING (next sibling with that tag).
"""
from __future__ import annotations

from typing import Tuple

CHILD = "child"
SIBLING = "sibling"

Chain = Tuple[Tuple[str, str], ...]

# <a name="History"> marks the start of the transaction history section.
HISTORY_TAG = "a"
HISTORY_ATTR = ("name", "History")

# From the anchor down to the tbody holding the transaction rows.
HISTORY_BODY_CHAIN: Chain = (
    (CHILD, "table"),
    (CHILD, "tbody"),
    (CHILD, "tr"),
    (SIBLING, "tr"),
    (CHILD, "td"),
    (CHILD, "table"),
    (CHILD, "tbody"),
)

ROW_TAG = "tr"
CELL_TAG = "td"
LABEL_TAG = "label"   # data cells wrap their value in <label>
BOLD_TAG = "b"        # details headers/values are bolded

# From a "more details" row down to the tbody of its sub-table.
# The first table in the panel is layout chrome; the data is in the second.
DETAILS_BODY_CHAIN: Chain = (
    (CHILD, "td"),
    (CHILD, "div"),
    (CHILD, "div"),
    (CHILD, "table"),
    (SIBLING, "table"),
    (CHILD, "tbody"),
)

ACTION_KEY = "Action"

# Fields copied from the primary row into each entry of a fan-out.
CORE_KEYS: Tuple[str, ...] = ("Date", "Description", "Action", "Symbol")

# Action values, as they appear in the Action column.
DEPOSIT = "Deposit"
FORCED_QUICK_SELL = "Forced Quick Sell"
LAPSE = "Lapse"
EXER_AND_HOLD = "Exer and Hold"
SALE = "Sale"
JOURNAL = "Journal"
FORCED_DISBURSEMENT = "Forced Disbursement"
