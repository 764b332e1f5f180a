# eac/rows.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .cursor import Cursor
from .errors import StructuralMismatch
from .layout import ACTION_KEY, CELL_TAG, LABEL_TAG
from .normalize import clean_text

log = logging.getLogger("eac.rows")

HeaderMap = Dict[str, int]


def extract_row(n: Cursor) -> Optional[List[str]]:
    """
    Read a regular data row: one value per <td>, taken from the <label> inside it.
    Returns None if any cell has no <label>, which is how "more details" rows
    (same <tr> tag, different insides) are told apart. The cursor doesn't move.
    """
    values: List[str] = []
    with n.lookahead():
        n.child(CELL_TAG)
        while n.ok():
            with n.lookahead():
                n.child(LABEL_TAG)
                val = clean_text(n.peek_text())
                if not n.ok():
                    return None
            values.append(val)
            n.sibling(CELL_TAG)
    return values


def header_mapping(labels: Sequence[str]) -> HeaderMap:
    """Column label -> column index. A repeated label keeps its last position."""
    return {label: i for i, label in enumerate(labels)}


def read_header(n: Cursor) -> HeaderMap:
    labels = extract_row(n)
    if labels is None:
        raise StructuralMismatch("no header: first row is not a labelled row")
    header = header_mapping(labels)
    if ACTION_KEY not in header:
        raise StructuralMismatch(f'"{ACTION_KEY}" header not found')
    log.debug("header columns: %s", labels)
    return header


def row_fields(header: HeaderMap, values: Sequence[str], keys: Optional[Sequence[str]] = None) -> Dict[str, str]:
    """Re-key positional row values by header label (all labels, or just `keys`)."""
    wanted = list(header) if keys is None else list(keys)
    out: Dict[str, str] = {}
    for k in wanted:
        i = header.get(k)
        if i is None:
            raise StructuralMismatch(f'"{k}" header not found')
        if i >= len(values):
            raise StructuralMismatch(
                f"row has {len(values)} cells; no value for column {k!r} (#{i + 1})"
            )
        out[k] = values[i]
    return out
