# ledger_api/api/v1/routes/transactions.py
from __future__ import annotations

from uuid import UUID, uuid4

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from ledger_api.api.deps import (
    SESSION_COOKIE,
    SESSION_MAX_AGE,
    log_request,
    optional_session_id,
    require_session_id,
)
from ledger_api.core.logging import get_logger
from ledger_api.database.session import get_db
from ledger_api.models.transaction import Transaction as TM
from ledger_api.schemas.transaction import (
    Summary,
    SummaryOut,
    TransactionCreate,
    TransactionDetailOut,
    TransactionListOut,
    TransactionOut,
)

logger = get_logger(__name__)

router = APIRouter(dependencies=[Depends(log_request)])


# ========= create =========
@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_transaction(
    body: TransactionCreate,
    session_id: str | None = Depends(optional_session_id),
    db: Session = Depends(get_db),
):
    response = Response(status_code=status.HTTP_201_CREATED)

    if not session_id:
        session_id = str(uuid4())
        response.set_cookie(
            SESSION_COOKIE,
            session_id,
            path="/",
            max_age=SESSION_MAX_AGE,
        )
        logger.info("Minted session %s", session_id)

    tx = TM(
        id=str(uuid4()),
        title=body.title,
        amount=body.signed_amount(),
        session_id=session_id,
    )
    db.add(tx)
    db.commit()
    return response


# ========= list =========
@router.get("", response_model=TransactionListOut)
def list_transactions(
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db),
):
    rows = db.query(TM).filter(TM.session_id == session_id).all()
    return {"transactions": [TransactionOut.model_validate(r) for r in rows]}


# ========= summary =========
# registered before /{transaction_id} so "summary" is not read as an id
@router.get("/summary", response_model=SummaryOut)
def get_summary(
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db),
):
    total = (
        db.query(func.sum(TM.amount).label("amount"))
        .filter(TM.session_id == session_id)
        .scalar()
    )
    # no rows -> SUM is NULL, kept as null rather than 0
    amount = float(total) if total is not None else None
    return {"summary": Summary(amount=amount)}


# ========= get by id =========
@router.get("/{transaction_id}", response_model=TransactionDetailOut)
def get_transaction(
    transaction_id: UUID,
    session_id: str = Depends(require_session_id),
    db: Session = Depends(get_db),
):
    row = (
        db.query(TM)
        .filter(TM.session_id == session_id, TM.id == str(transaction_id))
        .first()
    )
    transaction = TransactionOut.model_validate(row) if row is not None else None
    return {"transaction": transaction}
