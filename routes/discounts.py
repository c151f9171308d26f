from dataclasses import asdict
from datetime import date

from fastapi import APIRouter
from pydantic import BaseModel, Field

from models.discount_dto import DiscountResponseDTO, TransactionRecord
from services.discount_rule_engine import evaluate

router = APIRouter()


class TransactionIn(BaseModel):
    occurred_on: date
    product_name: str
    expires_on: date
    quantity: int = Field(ge=0)
    unit_price: float = Field(ge=0, allow_inf_nan=False)
    channel: str
    payment_method: str

    def to_record(self) -> TransactionRecord:
        return TransactionRecord(
            occurred_on=self.occurred_on,
            product_name=self.product_name,
            expires_on=self.expires_on,
            quantity=self.quantity,
            unit_price=self.unit_price,
            channel=self.channel,
            payment_method=self.payment_method,
        )


@router.post("/discounts/evaluate")
def evaluate_discount(txn: TransactionIn):
    """
    Compute the discount for a transaction without saving it.
    """
    result = evaluate(txn.to_record())
    return asdict(DiscountResponseDTO.from_result(result))
