# helpers/normalize.py
from models.discount_dto import TransactionRecord
from utils.dates import date_from_timestamp, normalize_date
from utils.money import parse_money, parse_quantity

REQUIRED_COLUMNS = {
    "timestamp",
    "product_name",
    "expiry_date",
    "quantity",
    "unit_price",
    "channel",
    "payment_method",
}


def normalize_row(row: dict) -> TransactionRecord:
    """
    Convert a CSV row into a TransactionRecord.

    Raises ValueError when a field is missing or cannot be parsed.
    """
    missing = sorted(col for col in REQUIRED_COLUMNS if not (row.get(col) or "").strip())
    if missing:
        raise ValueError(f"Missing required values: {', '.join(missing)}")

    return TransactionRecord(
        occurred_on=date_from_timestamp(row["timestamp"]),
        product_name=row["product_name"].strip(),
        expires_on=normalize_date(row["expiry_date"]),
        quantity=parse_quantity(row["quantity"]),
        unit_price=parse_money(row["unit_price"]),
        channel=row["channel"].strip(),
        payment_method=row["payment_method"].strip(),
    )
