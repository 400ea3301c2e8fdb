"""Batch-price a sheet of European puts.

Input CSV format
----------------
    id,r,S,sigma,K,t
    1,0.05,100,0.20,100,1.0
    2,0.00,50,0.30,60,0.5

Output
------
CSV or JSON with columns: id, price, valid (and error for failed rows).
"""

from __future__ import annotations

import csv
import json
import logging
import math
from pathlib import Path
from typing import Iterable

from .core import PARAMS, PutSpec
from .black_scholes import price, bsm_put_strict

logger = logging.getLogger(__name__)

__all__ = ["read_rows", "price_row", "price_book", "write_results"]


def read_rows(path: str | Path) -> list[dict]:
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


def _spec_from_row(row: dict) -> PutSpec:
    # DictReader fills the fields of a short row with None
    missing = [p for p in PARAMS if row.get(p) is None]
    if missing:
        raise KeyError(f"missing column(s): {', '.join(missing)}")
    return PutSpec(*(float(row[p]) for p in PARAMS))


def price_row(row: dict, *, strict: bool = False) -> dict:
    """Price one row.  Malformed numbers raise ``ValueError``."""
    spec = _spec_from_row(row)
    if strict:
        px = bsm_put_strict(*spec.as_args())
    else:
        px = price(spec)
    return {"id": row.get("id", ""), "price": px, "valid": not math.isnan(px)}


def price_book(rows: Iterable[dict], *, strict: bool = False) -> list[dict]:
    """Price every row; failures are logged and recorded, not raised."""
    results = []
    for i, row in enumerate(rows):
        try:
            res = price_row(row, strict=strict)
        except (ValueError, KeyError) as e:
            # DomainError is a ValueError
            msg = e.args[0] if isinstance(e, KeyError) else str(e)
            logger.warning("Row %d (id=%s): %s", i, row.get("id", "?"), msg)
            res = {"id": row.get("id", ""), "price": None, "valid": False,
                   "error": msg}
        results.append(res)

    n_fail = sum(1 for r in results if r["price"] is None)
    n_invalid = sum(1 for r in results if r["price"] is not None and not r["valid"])
    logger.info(
        "Priced: %d  |  Invalid: %d  |  Failed: %d",
        len(results) - n_fail - n_invalid, n_invalid, n_fail,
    )
    return results


def write_results(results: list[dict], path: str | Path) -> None:
    output_path = Path(path)
    if output_path.suffix == ".json":
        # nan is not valid JSON
        clean = [
            {k: (None if isinstance(v, float) and math.isnan(v) else v)
             for k, v in r.items()}
            for r in results
        ]
        with open(output_path, "w") as f:
            json.dump(clean, f, indent=2)
        return

    fieldnames: list[str] = []
    for r in results:
        for k in r:
            if k not in fieldnames:
                fieldnames.append(k)
    with open(output_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(results)
