# eac/run_once.py
# Convert a saved Schwab Employee Awards Center history page to JSON.
#
# Save the page first: "My Equity Awards" > "History & Statements", date
# range "All", then save it from the browser (Safari keeps the table intact).
#
# Usage:
#   eac2json [history.html]          (reads stdin without a file)
#   python -m eac.run_once history.html > history.json
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, NoReturn, Optional, Sequence

from dotenv import load_dotenv

from .config import load_settings
from .errors import Eac2JsonError
from .parse_history import parse_history_html

PROG = "eac2json"

log = logging.getLogger("eac.run_once")


def _read_input(path: Optional[str]) -> bytes:
    # Bytes, so BeautifulSoup can sniff the page's declared encoding.
    if path is None:
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _write_json(entries: List[Any]) -> None:
    json.dump(entries, sys.stdout, sort_keys=True)
    sys.stdout.write("\n")
    sys.stdout.flush()


def _fail(msg: Any) -> NoReturn:
    print(f"{PROG}: {msg}", file=sys.stderr)
    sys.exit(1)


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser(
        prog=PROG,
        description="Convert a saved Schwab EAC transaction history page to JSON.",
    )
    ap.add_argument("file", nargs="?", help="saved HTML page (default: stdin)")
    args = ap.parse_args(argv)

    load_dotenv()
    try:
        settings = load_settings()
    except ValueError as e:
        _fail(e)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        html = _read_input(args.file)
        log.debug("read %d bytes from %s", len(html), args.file or "<stdin>")
        entries = parse_history_html(
            html,
            sale_policy=settings.sale_policy,
            parser=settings.html_parser,
        )
    # ValueError covers bs4.FeatureNotFound for a tree builder that isn't installed.
    except (Eac2JsonError, OSError, ValueError) as e:
        _fail(e)

    _write_json(entries)


if __name__ == "__main__":
    main()
