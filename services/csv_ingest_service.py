import csv
import io
import logging

import duckdb

from db import get_db
from helpers.normalize import REQUIRED_COLUMNS, normalize_row
from services.transaction_service import apply_discounts, save_discounted_transaction

logger = logging.getLogger(__name__)


def ingest_csv(contents: str):
    """
    Parse a transactions CSV, apply discount rules to every valid row and
    persist the results.

    Rows that fail to parse or save are reported in ``failed`` and do not
    stop the run.
    """
    reader = csv.DictReader(io.StringIO(contents, newline=""))
    if not reader.fieldnames:
        return {"success": False, "error": "CSV is missing headers"}

    fieldnames = {name.strip() for name in reader.fieldnames}
    missing = sorted(REQUIRED_COLUMNS - fieldnames)
    if missing:
        return {"success": False, "error": f"CSV is missing required columns: {', '.join(missing)}"}

    # Parse all rows up front; counts are logged before any write.
    parsed = []
    for idx, row in enumerate(reader, start=1):
        row = {(key or "").strip(): value for key, value in row.items()}
        try:
            parsed.append((idx, normalize_row(row), None))
        except (ValueError, KeyError) as e:
            parsed.append((idx, None, str(e)))

    valid_count = sum(1 for _, tx, _ in parsed if tx is not None)
    logger.info(
        "Parsed %d transactions. Successful: %d, Failed: %d",
        len(parsed), valid_count, len(parsed) - valid_count,
    )

    results = []
    conn = get_db()
    try:
        for idx, transaction, parse_error in parsed:
            row_result = {"row": idx, "success": False, "error": parse_error}

            if transaction is None:
                logger.warning("Skipping invalid transaction at row %d: %s", idx, parse_error)
                results.append(row_result)
                continue

            discounted = apply_discounts(transaction)
            row_result["final_discount"] = discounted.result.final_discount
            try:
                save_discounted_transaction(conn, discounted)
                row_result["success"] = True
            except duckdb.Error as e:
                row_result["error"] = str(e)
                logger.error(
                    "Failed to save transaction for %s: %s", transaction.product_name, e
                )

            results.append(row_result)
    finally:
        conn.close()

    saved = sum(r["success"] for r in results)
    logger.info("Processing complete: %d of %d transactions saved", saved, len(results))

    return {
        "success": True,
        "saved": saved,
        "failed": [
            {"row": r["row"], "error": r["error"]}
            for r in results if not r["success"]
        ],
        "total": len(results),
    }


def ingest_csv_file(path: str):
    logger.info("Reading CSV from: %s", path)
    with open(path, encoding="utf-8-sig") as fh:
        return ingest_csv(fh.read())
