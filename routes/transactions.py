from dataclasses import asdict

from fastapi import APIRouter, Query

from models.discount_dto import DiscountResponseDTO
from routes.discounts import TransactionIn
from services.transaction_service import (
    get_all_discounted_transactions,
    process_transaction,
)

router = APIRouter()


# -------------------------
# EVALUATE AND SAVE
# -------------------------

@router.post("/transactions")
def add_transaction(txn: TransactionIn):
    row_id, discounted = process_transaction(txn.to_record())
    return {
        "success": True,
        "id": row_id,
        "discount": asdict(DiscountResponseDTO.from_result(discounted.result)),
    }


# -------------------------
# READ TRANSACTIONS
# -------------------------

@router.get("/transactions")
def list_transactions(limit: int | None = Query(None, ge=1)):
    transactions = get_all_discounted_transactions(limit=limit)
    return {
        "transaction_count": len(transactions),
        "transactions": transactions,
    }
