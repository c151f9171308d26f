import logging

from db import get_db
from models.discount_dto import DiscountedTransaction, TransactionRecord
from repositories.discounted_transactions_repository import (
    get_all_discounted_transactions as repo_get_all_discounted_transactions,
    insert_discounted_transaction as repo_insert_discounted_transaction,
)
from services.discount_rule_engine import evaluate

logger = logging.getLogger(__name__)


def apply_discounts(transaction: TransactionRecord) -> DiscountedTransaction:
    """Evaluate the discount rules and pair the result with its transaction."""
    result = evaluate(transaction)
    logger.info(
        "Applied discount of %d%% to %s (%s)",
        round(result.final_discount * 100),
        transaction.product_name,
        ",".join(c.rule_name for c in result.applied_discounts) or "no rules matched",
    )
    return DiscountedTransaction(transaction=transaction, result=result)


def save_discounted_transaction(conn, discounted: DiscountedTransaction):
    """Persist on an existing connection; returns the new row id."""
    row_id = repo_insert_discounted_transaction(conn, discounted)
    logger.info("Saved transaction for %s", discounted.transaction.product_name)
    return row_id


def process_transaction(transaction: TransactionRecord):
    """Evaluate and persist a single transaction.

    Opens and closes a database connection on the caller's behalf.
    Returns ``(row_id, discounted_transaction)``.
    """
    discounted = apply_discounts(transaction)
    conn = get_db()
    try:
        row_id = save_discounted_transaction(conn, discounted)
    finally:
        conn.close()
    return row_id, discounted


def get_all_discounted_transactions(limit=None):
    conn = get_db()
    try:
        return repo_get_all_discounted_transactions(conn, limit=limit)
    finally:
        conn.close()
