"""
Builders for minimal pages shaped like the saved EAC history page:

  <a name="History">
    <table><tbody>
      <tr> title row </tr>
      <tr><td><table><tbody>
        header row, data rows, "more details" rows ...
      </tbody></table></td></tr>
    </tbody></table>
  </a>
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Sequence

import pytest
from bs4 import BeautifulSoup

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

HEADER = ("Date", "Action", "Symbol", "Quantity", "Description", "Amount")

DETAIL_HEADER = ("Sale Price", "Shares", "Grant Id", "", "")


def data_row(*values: str) -> str:
    cells = "".join(f"<td><label>{v}</label></td>" for v in values)
    return f"<tr>{cells}</tr>"


def txn(date: str, action: str, symbol: str = "GOOG", quantity: str = "10",
        description: str = "", amount: str = "") -> str:
    # Same column order as HEADER.
    return data_row(date, action, symbol, quantity, description, amount)


def _panel(body: str) -> str:
    return (
        "<tr><td><div><div>"
        "<table><tr><td>Details</td></tr></table>"
        f"<table><tbody>{body}</tbody></table>"
        "</div></div></td></tr>"
    )


def details_rows(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    head = "".join(f"<td><b>{h}</b></td>" if h else "<td></td>" for h in headers)
    body = "".join(
        "<tr>" + "".join(f"<td>{c}</td>" for c in r) + "</tr>" for r in rows
    )
    return _panel(f"<tr>{head}</tr>{body}")


def details_panel(*cells_per_row: Sequence[str]) -> str:
    """Each row is a list of raw <td> bodies, e.g. 'Shares: <b>5</b>'."""
    body = "".join(
        "<tr>" + "".join(f"<td>{c}</td>" for c in r) + "</tr>" for r in cells_per_row
    )
    return _panel(body)


def page(*rows: str, header: Sequence[str] = HEADER) -> str:
    return (
        "<html><head><title>EAC</title></head><body>"
        "<div id='nav'><a href='#History'>History</a></div>"
        "<a name='History'><table><tbody>"
        "<tr><td>Transaction History</td></tr>"
        "<tr><td><table><tbody>"
        + data_row(*header)
        + "".join(rows)
        + "</tbody></table></td></tr>"
        "</tbody></table></a>"
        "</body></html>"
    )


@pytest.fixture
def soup_of():
    def make(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return make
