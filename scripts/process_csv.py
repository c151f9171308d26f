import argparse
import logging

import config
from db import init_db
from services.csv_ingest_service import ingest_csv_file

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Apply discount rules to a transactions CSV")
    parser.add_argument("csv_path", help="Path to the transactions CSV file")
    parser.add_argument("--db", type=str, default=config.DB_FILE, help="DuckDB file to write results to")
    args = parser.parse_args(argv)

    config.setup_logging()
    config.DB_FILE = args.db

    logger.info("Starting transaction processing")
    init_db()

    try:
        summary = ingest_csv_file(args.csv_path)
    except OSError as e:
        logger.error("Failed to read CSV file: %s", e)
        return 1

    if not summary["success"]:
        logger.error("Failed to process CSV file: %s", summary["error"])
        return 1

    print(f"Saved {summary['saved']} of {summary['total']} transactions")
    for failure in summary["failed"]:
        print(f"  row {failure['row']}: {failure['error']}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
