# eac/classify.py
"""
Walk the transaction rows and turn each one (plus its "more details" row, if it
has one) into ledger entries, according to the row's Action.

  Deposit, Forced Quick Sell  primary row + the single details row, one entry
  Lapse                       primary row + the details panel, one entry
  Exer and Hold (and Sale)    one entry per details row, core fields only
  Journal                     skipped along with its details row
  Forced Disbursement         skipped; it has no details row
  anything else               UnknownAction

What happens to Sale depends on SalePolicy. Schwab repeats most events under
several actions, so only the listed ones are turned into records.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Sequence

from . import layout
from .cursor import Cursor
from .errors import CardinalityViolation, StructuralMismatch, UnknownAction
from .ledger import Entry, Ledger
from .parse_detail import details_panel, details_rows
from .rows import HeaderMap, extract_row, row_fields

log = logging.getLogger("eac.classify")


class SalePolicy(str, Enum):
    # Option/ESPP sales fan out per lot like exercise-and-holds.
    FAN_OUT = "fanout"
    # Option/ESPP sales are never at a loss, so they don't matter for wash sales.
    SKIP = "skip"

    @classmethod
    def parse(cls, value: "str | SalePolicy") -> "SalePolicy":
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(f"unknown sale policy {value!r} (expected one of: {choices})") from None


Handler = Callable[[Cursor, Ledger, HeaderMap, List[str], str], None]


def _next_row(n: Cursor, action: str) -> None:
    n.sibling(layout.ROW_TAG)
    if not n.ok():
        raise StructuralMismatch(f'{action}: missing "more details" row')


def _single_details(n: Cursor, l: Ledger, header: HeaderMap, values: List[str], action: str) -> None:
    # Schwab sells RSUs for taxes by first depositing them into the EAC
    # account and then selling them; each shows up with exactly one details row.
    l.next()
    l.update(row_fields(header, values))

    _next_row(n, action)
    entries = details_rows(n)
    if len(entries) != 1:
        raise CardinalityViolation(action, "exactly 1", len(entries))
    l.update(entries[0])


def _lapse(n: Cursor, l: Ledger, header: HeaderMap, values: List[str], action: str) -> None:
    l.next()
    l.update(row_fields(header, values))

    _next_row(n, action)
    l.update(details_panel(n))


def _fan_out(core_keys: Sequence[str]) -> Handler:
    def handle(n: Cursor, l: Ledger, header: HeaderMap, values: List[str], action: str) -> None:
        # One primary row can cover several lots at different prices;
        # each becomes its own entry.
        core = row_fields(header, values, core_keys)

        _next_row(n, action)
        entries = details_rows(n)
        if not entries:
            raise CardinalityViolation(action, "at least 1", 0)

        log.debug("%s: %d lot(s)", action, len(entries))
        for e in entries:
            l.next()
            l.update(core)
            l.update(e)

    return handle


def _skip_details(n: Cursor, l: Ledger, header: HeaderMap, values: List[str], action: str) -> None:
    # The next row holds more details, but they aren't useful to us.
    n.sibling(layout.ROW_TAG)


def _ignore(n: Cursor, l: Ledger, header: HeaderMap, values: List[str], action: str) -> None:
    pass


def handlers(sale_policy: SalePolicy = SalePolicy.FAN_OUT,
             core_keys: Sequence[str] = layout.CORE_KEYS) -> Dict[str, Handler]:
    fan_out = _fan_out(core_keys)
    table: Dict[str, Handler] = {
        layout.DEPOSIT: _single_details,
        layout.FORCED_QUICK_SELL: _single_details,
        layout.LAPSE: _lapse,
        layout.EXER_AND_HOLD: fan_out,
        layout.SALE: fan_out,
        layout.JOURNAL: _skip_details,
        layout.FORCED_DISBURSEMENT: _ignore,
    }
    if SalePolicy.parse(sale_policy) is SalePolicy.SKIP:
        table[layout.SALE] = _skip_details
    return table


def build_ledger(n: Cursor, header: HeaderMap, *,
                 sale_policy: SalePolicy = SalePolicy.FAN_OUT,
                 core_keys: Sequence[str] = layout.CORE_KEYS) -> List[Entry]:
    """
    `n` points at the header row; every following <tr> is processed in order.
    Returns the committed entries.
    """
    table = handlers(sale_policy, core_keys)
    action_col = header[layout.ACTION_KEY]
    l = Ledger()

    n.sibling(layout.ROW_TAG)
    while n.ok():
        values = extract_row(n)
        if values is None:
            raise StructuralMismatch("bad row: not a labelled data row")
        if action_col >= len(values):
            raise StructuralMismatch(f"bad row: {len(values)} cells, no {layout.ACTION_KEY} column")

        action = values[action_col]
        handler = table.get(action)
        if handler is None:
            raise UnknownAction(action)

        log.debug("row %s (%d entries so far)", action, len(l))
        handler(n, l, header, values, action)
        n.sibling(layout.ROW_TAG)

    return l.close()
