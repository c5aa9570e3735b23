"""
Evaluate grana-sheets formulas from the terminal.

Usage:
    grana-sheets CDB 1000 115% 01/01/2017
    grana-sheets TESOURODIRETOHIST "Tesouro Selic 2025" preco_venda 01/01/2017 2019-01-01
    grana-sheets --email me@example.com SELIC valor
    grana-sheets --list

Arguments are read the way a spreadsheet would type its cells: numbers
become numbers, YYYY-MM-DD becomes a date, anything else stays text.
"""

import argparse
import datetime
import inspect
import json
import logging
import os
import re
import sys
from typing import Any, List, Optional

from grana_sheets.config import settings
from grana_sheets.functions import GranaFunctions
from grana_sheets.sources.base import ProviderError
from grana_sheets.sources.identity import EnvironmentIdentity, StaticIdentity
from grana_sheets.utils import log
from grana_sheets.utils.session import RequestSession

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_INT = re.compile(r"^-?\d+$")
_FLOAT = re.compile(r"^-?\d+\.\d+$")


def parse_cell_value(raw: str) -> Any:
    """Turn a command-line argument into the value a typed cell would hold."""
    if _ISO_DATE.match(raw):
        try:
            return datetime.date.fromisoformat(raw)
        except ValueError:
            # Not a real calendar date (e.g. 2017-02-30): keep the text
            return raw
    if _INT.match(raw):
        return int(raw)
    if _FLOAT.match(raw):
        return float(raw)
    return raw


def _formula_params(formula: str) -> List[str]:
    # Unbound method, so drop self
    method = getattr(GranaFunctions, GranaFunctions.FORMULAS[formula])
    return list(inspect.signature(method).parameters)[1:]


def _arity(formula: str) -> int:
    return len(_formula_params(formula))


def _print_formulas() -> None:
    rows = []
    for formula in GranaFunctions.FORMULAS:
        rows.append((formula, "(" + ", ".join(_formula_params(formula)) + ")"))
    log.summary_table("Available formulas", rows)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grana-sheets",
        description="Fetch Tesouro Direto, fixed income, indicator and stock data",
    )
    parser.add_argument("formula", nargs="?", help="Formula name (e.g. CDB, TESOURODIRETO, FUN)")
    parser.add_argument("args", nargs="*", help="Formula arguments, in order")
    parser.add_argument("--list", action="store_true", help="List available formulas and exit")
    parser.add_argument("--email", help="Caller email to send instead of $GRANA_OWNER_EMAIL")
    parser.add_argument("--json", action="store_true", help="Print the raw value as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests (DEBUG)")
    return parser


def main(argv: Optional[List[str]] = None, fns: Optional[GranaFunctions] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, settings.LOG_LEVEL, logging.INFO)
    log.setup_verbose_logging("grana_sheets", level=level)

    if args.list:
        _print_formulas()
        return 0

    if not args.formula:
        parser.print_usage(sys.stderr)
        log.err("A formula name is required (see --list)")
        return 2

    formula = args.formula.strip().upper()
    if formula not in GranaFunctions.FORMULAS:
        log.err(f"Unknown formula: {args.formula} (see --list)")
        return 2

    expected = _arity(formula)
    if len(args.args) != expected:
        log.err(f"{formula} takes {expected} argument(s), got {len(args.args)}")
        return 2

    if fns is None:
        if args.email:
            identity = StaticIdentity(args.email)
        else:
            identity = EnvironmentIdentity(settings.OWNER_EMAIL_VAR)
            if not os.getenv(settings.OWNER_EMAIL_VAR):
                log.warn(f"{settings.OWNER_EMAIL_VAR} is not set; requests will carry the error text instead of an email")
        fns = GranaFunctions(RequestSession(), identity, settings)

    values = [parse_cell_value(a) for a in args.args]
    try:
        result = fns.call(formula, *values)
    except ProviderError as e:
        log.err(f"{formula}: {e}")
        logger.debug(f"{formula} failed", exc_info=True)
        return 1

    if args.json:
        print(json.dumps(result, ensure_ascii=False))
    elif isinstance(result, (list, dict)):
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        print("" if result is None else result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
