import logging
import os
import sys

DB_FILE = os.getenv("DISCOUNT_DB_FILE", "discounts.duckdb")
LOG_FILE = os.getenv("DISCOUNT_LOG_FILE", "rules_engine.log")
LOG_LEVEL = os.getenv("DISCOUNT_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level=None, log_file=None) -> None:
    """
    Configure application logging: append to the rules engine log file
    and echo to stdout. An empty DISCOUNT_LOG_FILE disables the file.
    """
    level = level or LOG_LEVEL
    log_file = LOG_FILE if log_file is None else log_file

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
