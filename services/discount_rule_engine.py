"""
Discount Rule Engine — Deterministic Rule-Based Discount Calculation

Pure functions for evaluating a transaction against the fixed discount catalog,
resolving the quantity/app overlap, combining the surviving discounts and
projecting the final price.
No database access; no side effects.
"""

from models.discount_dto import (
    DiscountCandidate,
    DiscountResult,
    TransactionRecord,
)

APP_CHANNEL = "App"
VISA_PAYMENT = "Visa"

EXPIRY_WINDOW_DAYS = 30

# (min_quantity, max_quantity or None for open-ended, value)
QUANTITY_TIERS = [
    (6, 9, 0.05),
    (10, 14, 0.07),
    (15, None, 0.10),
]

APP_QUANTITY_TIERS = [
    (1, 5, 0.05),
    (6, 10, 0.10),
    (11, 15, 0.15),
    (16, None, 0.20),
]


def _tier_value(quantity: int, tiers: list) -> float | None:
    for low, high, value in tiers:
        if quantity >= low and (high is None or quantity <= high):
            return value
    return None


def days_until_expiry(transaction: TransactionRecord) -> int:
    return (transaction.expires_on - transaction.occurred_on).days


# -----------------------------
# Rules
# -----------------------------

def expiry_date_discount(transaction: TransactionRecord) -> DiscountCandidate | None:
    """1% per day for products in their last 30 days before expiry."""
    days = days_until_expiry(transaction)
    if 0 <= days < EXPIRY_WINDOW_DAYS:
        return DiscountCandidate("ExpiryDateDiscount", (EXPIRY_WINDOW_DAYS - days) / 100.0)
    return None


def product_type_discount(transaction: TransactionRecord) -> DiscountCandidate | None:
    """
    Cheese or wine discount. Returns at most one candidate; a name matching
    both substrings gets the cheese discount.
    """
    product_name = transaction.product_name.lower()
    if "cheese" in product_name:
        return DiscountCandidate("CheeseDiscount", 0.10)
    if "wine" in product_name:
        return DiscountCandidate("WineDiscount", 0.05)
    return None


def special_day_discount(transaction: TransactionRecord) -> DiscountCandidate | None:
    occurred_on = transaction.occurred_on
    if occurred_on.month == 3 and occurred_on.day == 23:
        return DiscountCandidate("SpecialDayDiscount", 0.50)
    return None


def quantity_discount(transaction: TransactionRecord) -> DiscountCandidate | None:
    value = _tier_value(transaction.quantity, QUANTITY_TIERS)
    if value is None:
        return None
    return DiscountCandidate("QuantityDiscount", value)


def app_discount(transaction: TransactionRecord) -> DiscountCandidate | None:
    if transaction.channel != APP_CHANNEL:
        return None
    value = _tier_value(transaction.quantity, APP_QUANTITY_TIERS)
    if value is None:
        return None
    return DiscountCandidate("AppDiscount", value)


def visa_discount(transaction: TransactionRecord) -> DiscountCandidate | None:
    if transaction.payment_method == VISA_PAYMENT:
        return DiscountCandidate("VisaDiscount", 0.05)
    return None


# -----------------------------
# Exclusivity, combination, projection
# -----------------------------

def resolve_exclusive(
    first: DiscountCandidate | None,
    second: DiscountCandidate | None,
) -> DiscountCandidate | None:
    """
    Keep the larger of two mutually exclusive candidates.

    The second one wins only when strictly greater; ties go to the first.
    """
    if first is None:
        return second
    if second is None:
        return first
    return second if second.value > first.value else first


def top_discounts(candidates: list[DiscountCandidate], limit: int = 2) -> list[DiscountCandidate]:
    """
    Return the ``limit`` largest candidates, highest first.

    The sort is stable: among equal values the earliest evaluated comes first.
    """
    return sorted(candidates, key=lambda c: c.value, reverse=True)[:limit]


def combine_discounts(candidates: list[DiscountCandidate]) -> float:
    """
    Business rule for the final discount:
    none → 0.0, one → its value, several → mean of the top two.

    Not clamped to [0, 1].
    """
    if not candidates:
        return 0.0
    if len(candidates) == 1:
        return candidates[0].value

    top_two = top_discounts(candidates, limit=2)
    return sum(c.value for c in top_two) / len(top_two)


def project_price(unit_price: float, final_discount: float) -> float:
    return unit_price * (1 - final_discount)


# -----------------------------
# Pipeline
# -----------------------------

def get_applicable_discounts(transaction: TransactionRecord) -> list[DiscountCandidate]:
    """
    Run every rule against the transaction, in evaluation order.

    Quantity and app discounts both depend on quantity, so only the larger
    of the two is kept, in the quantity slot.
    """
    candidates = [
        expiry_date_discount(transaction),
        product_type_discount(transaction),
        special_day_discount(transaction),
        resolve_exclusive(quantity_discount(transaction), app_discount(transaction)),
        visa_discount(transaction),
    ]
    return [c for c in candidates if c is not None]


def evaluate(transaction: TransactionRecord) -> DiscountResult:
    """
    Compute the discount for a single transaction.

    Pure function: same transaction → same result. Never raises on a
    well-formed record; no match yields a zero discount.
    """
    applied = get_applicable_discounts(transaction)
    final_discount = combine_discounts(applied)

    return DiscountResult(
        applied_discounts=tuple(applied),
        final_discount=final_discount,
        final_price=project_price(transaction.unit_price, final_discount),
    )
