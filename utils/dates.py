from datetime import date, datetime


def normalize_date(raw_date: str) -> date:
    return datetime.strptime(raw_date.strip(), "%Y-%m-%d").date()


def date_from_timestamp(raw_timestamp: str) -> date:
    """Take the calendar date of an ISO timestamp like 2023-04-18T18:18:40Z."""
    return normalize_date(raw_timestamp.strip()[:10])
