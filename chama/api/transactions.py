from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select
from typing import List, Optional

from chama.database import get_session
from chama.models.transaction import Transaction
from chama.schemas.transaction import TransactionCreate, TransactionRead
from chama.utils.ledger import create_transaction

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.get("", response_model=List[TransactionRead])
def list_transactions(
    member_id: Optional[str] = Query(None, alias="memberId"),
    session: Session = Depends(get_session),
):
    query = select(Transaction)
    if member_id:
        query = query.where(Transaction.member_id == member_id)
    return session.exec(query).all()


@router.get("/{transaction_id}", response_model=TransactionRead)
def get_transaction(transaction_id: str, session: Session = Depends(get_session)):
    tx = session.get(Transaction, transaction_id)
    if not tx:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return tx


@router.post("", response_model=TransactionRead, status_code=201)
def add_transaction(tx_data: TransactionCreate, session: Session = Depends(get_session)):
    tx = create_transaction(session, tx_data)
    session.commit()
    session.refresh(tx)
    return tx
