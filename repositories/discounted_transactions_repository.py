from models.discount_dto import DiscountedTransaction
from services.discount_rule_engine import top_discounts

# -----------------------------
# Discounted Transactions Repository
# -----------------------------

COLUMNS = [
    "id", "timestamp", "product_name", "expiry_date", "quantity", "unit_price",
    "channel", "payment_method", "discount", "final_price", "applied_discounts",
    "created_at",
]


def summarize_applied_discounts(discounted: DiscountedTransaction) -> str:
    """Names of the top two applied discounts by value, comma-joined."""
    top_two = top_discounts(list(discounted.result.applied_discounts), limit=2)
    return ",".join(c.rule_name for c in top_two)


def insert_discounted_transaction(conn, discounted: DiscountedTransaction):
    """
    Inserts a discounted transaction and returns its new id.
    - conn: DuckDB connection (from get_db() or passed in)
    """
    tx = discounted.transaction
    result = discounted.result

    row = conn.execute(
        """
        INSERT INTO discounted_transactions
        (timestamp, product_name, expiry_date, quantity, unit_price, channel,
         payment_method, discount, final_price, applied_discounts)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        RETURNING id
        """,
        (
            tx.occurred_on,
            tx.product_name,
            tx.expires_on,
            tx.quantity,
            tx.unit_price,
            tx.channel,
            tx.payment_method,
            result.final_discount,
            result.final_price,
            summarize_applied_discounts(discounted),
        )
    ).fetchone()
    return row[0]


def get_all_discounted_transactions(conn, limit=None):
    """
    Returns persisted discounted transactions, newest first, as dicts.
    - limit: optional, max number of rows
    """
    query = f"SELECT {', '.join(COLUMNS)} FROM discounted_transactions ORDER BY id DESC"
    params = []

    if limit:
        query += " LIMIT ?"
        params.append(limit)

    rows = conn.execute(query, params).fetchall()
    return [dict(zip(COLUMNS, row)) for row in rows]


def count_discounted_transactions(conn):
    return conn.execute("SELECT COUNT(*) FROM discounted_transactions").fetchone()[0]
