from decimal import Decimal, InvalidOperation


def parse_money(value: str) -> float:
    if value is None:
        raise ValueError("missing money value")

    normalized = value.strip().replace("$", "").replace(",", "")
    if not normalized:
        raise ValueError("empty money value")

    try:
        amount = Decimal(normalized)
    except InvalidOperation as exc:
        raise ValueError(f"invalid money value: {value!r}") from exc

    if not amount.is_finite():
        raise ValueError(f"invalid money value: {value!r}")
    if amount < 0:
        raise ValueError(f"negative money value: {value!r}")

    return float(amount)


def parse_quantity(value: str) -> int:
    if value is None or not value.strip():
        raise ValueError("missing quantity")

    try:
        quantity = int(value.strip())
    except ValueError as exc:
        raise ValueError(f"invalid quantity: {value!r}") from exc

    if quantity < 0:
        raise ValueError(f"negative quantity: {value!r}")
    return quantity
