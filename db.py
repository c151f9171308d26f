import logging

import duckdb

import config

logger = logging.getLogger(__name__)


# -----------------------------
# Get a DB connection
# -----------------------------
def get_db(db_file=None):
    """
    Returns a new DuckDB connection.
    - db_file: optional path, defaults to the configured DISCOUNT_DB_FILE
    """
    return duckdb.connect(db_file or config.DB_FILE)


# -----------------------------
# Initialize database schema
# -----------------------------
def init_db(db_file=None):
    conn = get_db(db_file)
    try:
        conn.execute("""
        CREATE SEQUENCE IF NOT EXISTS discounted_transactions_id_seq
        START 1
        """)

        conn.execute("""
        CREATE TABLE IF NOT EXISTS discounted_transactions (
            id INTEGER PRIMARY KEY DEFAULT nextval('discounted_transactions_id_seq'),
            timestamp DATE NOT NULL,
            product_name VARCHAR NOT NULL,
            expiry_date DATE NOT NULL,
            quantity INTEGER NOT NULL,
            unit_price DOUBLE NOT NULL,
            channel VARCHAR NOT NULL,
            payment_method VARCHAR NOT NULL,
            discount DOUBLE NOT NULL,
            final_price DOUBLE NOT NULL,
            applied_discounts VARCHAR,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """)
        logger.info("Discounted transactions table ensured.")

        conn.execute(
            "CREATE INDEX IF NOT EXISTS idx_dtx_timestamp ON discounted_transactions(timestamp);"
        )
        logger.info("Indexes created/ensured.")
    finally:
        conn.close()
        logger.info("Database setup complete and connection closed.")
