from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class TransactionRecord:
    """A validated retail transaction, as handed over by ingestion."""
    occurred_on: date
    product_name: str
    expires_on: date
    quantity: int
    unit_price: float
    channel: str
    payment_method: str


@dataclass(frozen=True)
class DiscountCandidate:
    rule_name: str
    value: float  # fraction in [0, 1]


@dataclass(frozen=True)
class DiscountResult:
    applied_discounts: tuple[DiscountCandidate, ...]
    final_discount: float
    final_price: float


@dataclass(frozen=True)
class DiscountedTransaction:
    """A transaction paired with the discount computed for it."""
    transaction: TransactionRecord
    result: DiscountResult


@dataclass
class AppliedDiscountDTO:
    rule_name: str
    value: float


@dataclass
class DiscountResponseDTO:
    """JSON-serializable view of a DiscountResult."""
    applied_discounts: list[AppliedDiscountDTO]
    final_discount: float
    final_discount_pct: int
    final_price: float

    @classmethod
    def from_result(cls, result: DiscountResult):
        return cls(
            applied_discounts=[
                AppliedDiscountDTO(rule_name=c.rule_name, value=c.value)
                for c in result.applied_discounts
            ],
            final_discount=result.final_discount,
            final_discount_pct=round(result.final_discount * 100),
            final_price=result.final_price,
        )
