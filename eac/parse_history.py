# eac/parse_history.py
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Union

from bs4 import BeautifulSoup, Tag

from . import layout
from .classify import SalePolicy, build_ledger
from .cursor import Cursor
from .errors import StructuralMismatch
from .ledger import Entry
from .rows import read_header

log = logging.getLogger("eac.parse_history")

# HTML5 tree construction, so implied <tbody> elements are always present.
DEFAULT_PARSER = "html5lib"

# -----------------------
# History anchor / table
# -----------------------
def find_history(soup: Union[BeautifulSoup, Tag]) -> Optional[Tag]:
    """First <a name="History"> in document order, or None."""
    key, val = layout.HISTORY_ATTR
    return soup.find(layout.HISTORY_TAG, attrs={key: val})


def history_body(soup: Union[BeautifulSoup, Tag]) -> Cursor:
    """
    Cursor on the first <tr> (the header row) of the transaction table,
    reached from the History anchor along the fixed layout chain.
    """
    root = find_history(soup)
    if root is None:
        raise StructuralMismatch("no history")
    log.debug("found history anchor")

    n = Cursor(root)
    n.follow(layout.HISTORY_BODY_CHAIN)
    n.raise_for_error()
    if not isinstance(n.node, Tag) or n.node.name != "tbody":
        raise StructuralMismatch(f"bad table node {n.node!r}")

    n.child(layout.ROW_TAG)
    n.raise_for_error()
    return n


# ---------------------------
# Public entry point
# ---------------------------
def parse_history_soup(soup: Union[BeautifulSoup, Tag], *,
                       sale_policy: SalePolicy = SalePolicy.FAN_OUT,
                       core_keys: Sequence[str] = layout.CORE_KEYS) -> List[Entry]:
    n = history_body(soup)
    header = read_header(n)
    entries = build_ledger(n, header, sale_policy=sale_policy, core_keys=core_keys)
    log.info("extracted %d entries", len(entries))
    return entries


def parse_history_html(html: Union[str, bytes], *,
                       sale_policy: SalePolicy = SalePolicy.FAN_OUT,
                       parser: str = DEFAULT_PARSER,
                       core_keys: Sequence[str] = layout.CORE_KEYS) -> List[Entry]:
    soup = BeautifulSoup(html, parser)
    return parse_history_soup(soup, sale_policy=sale_policy, core_keys=core_keys)
