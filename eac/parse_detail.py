# eac/parse_detail.py
"""
"More details" rows. Each primary row of certain actions is followed by a <tr>
whose single cell holds a collapsible panel with a nested table. Two layouts:

  rows  (details_rows):  bolded header row, then one row per lot/event.
                         Produces one mapping per complete row.
  panel (details_panel): label/value pairs, the value bolded.
                         Produces a single merged mapping.

Both leave the cursor where it was.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .cursor import Cursor
from .layout import BOLD_TAG, CELL_TAG, DETAILS_BODY_CHAIN, ROW_TAG
from .normalize import clean_text

log = logging.getLogger("eac.parse_detail")


def _details_body(n: Cursor) -> None:
    n.follow(DETAILS_BODY_CHAIN)
    n.raise_for_error()


def _bold_text(n: Cursor) -> Optional[str]:
    """Text of the <b> inside the current cell, or None if there is no <b>."""
    with n.lookahead():
        n.child(BOLD_TAG)
        if not n.ok():
            return None
        # Usually inside the <b>; older pages put it right after an empty one.
        return clean_text(n.peek_text() or n.sibling_text())


def _header_labels(n: Cursor) -> List[str]:
    headers: List[str] = []
    with n.lookahead():
        n.child(CELL_TAG)
        while n.ok():
            with n.lookahead():
                n.child(BOLD_TAG)
                headers.append(clean_text(n.peek_text()))
            n.sibling(CELL_TAG)

    # Trailing columns without a label are layout padding.
    while headers and headers[-1] == "":
        headers.pop()
    return headers


def details_rows(n: Cursor) -> List[Dict[str, str]]:
    """
    Tabular "more details": first sub-row is the header, each following sub-row
    that has a cell for every header column becomes one mapping. Shorter rows
    (totals, spacers) are dropped.
    """
    entries: List[Dict[str, str]] = []
    with n.lookahead():
        _details_body(n)

        n.child(ROW_TAG)
        n.raise_for_error()
        headers = _header_labels(n)
        log.debug("details headers: %s", headers)

        n.sibling(ROW_TAG)
        while n.ok():
            with n.lookahead():
                m: Dict[str, str] = {}
                i = 0
                n.child(CELL_TAG)
                while n.ok() and i < len(headers):
                    m[headers[i]] = clean_text(n.peek_text())
                    n.sibling(CELL_TAG)
                    i += 1
                if i == len(headers):
                    entries.append(m)
            n.sibling(ROW_TAG)

    return entries


def details_panel(n: Cursor) -> Dict[str, str]:
    """
    Key/value "more details": every cell's text is a key and its bolded text the
    value. A labelled cell with no <b> of its own takes the <b> of the next cell.
    Unlabelled cells are skipped. All sub-rows merge into one mapping.
    """
    out: Dict[str, str] = {}
    with n.lookahead():
        _details_body(n)

        n.child(ROW_TAG)
        while n.ok():
            with n.lookahead():
                n.child(CELL_TAG)
                while n.ok():
                    key = clean_text(n.peek_text())
                    if key:
                        value = _bold_text(n)
                        if value is None:
                            n.sibling(CELL_TAG)
                            value = _bold_text(n) or ""
                        out[key] = value
                    n.sibling(CELL_TAG)
            n.sibling(ROW_TAG)

    log.debug("details panel: %d field(s)", len(out))
    return out
