from fastapi import APIRouter, Depends, Query
from sqlmodel import Session, select
from typing import List, Optional

from chama.database import get_session
from chama.models.loan import Loan
from chama.schemas.loan import LoanCreate, LoanRead, LoanRepayment, LoanUpdate
from chama.utils.ledger import create_loan, get_loan_or_404, repay_loan, update_loan

router = APIRouter(prefix="/api/loans", tags=["loans"])


@router.get("", response_model=List[LoanRead])
def list_loans(
    member_id: Optional[str] = Query(None, alias="memberId"),
    session: Session = Depends(get_session),
):
    query = select(Loan)
    if member_id:
        query = query.where(Loan.member_id == member_id)
    return session.exec(query).all()


@router.get("/{loan_id}", response_model=LoanRead)
def get_loan(loan_id: str, session: Session = Depends(get_session)):
    return get_loan_or_404(session, loan_id)


@router.post("", response_model=LoanRead, status_code=201)
def approve_loan(loan_data: LoanCreate, session: Session = Depends(get_session)):
    loan = create_loan(session, loan_data)
    session.commit()
    session.refresh(loan)
    return loan


@router.patch("/{loan_id}", response_model=LoanRead)
def patch_loan(loan_id: str, loan_data: LoanUpdate, session: Session = Depends(get_session)):
    loan = get_loan_or_404(session, loan_id)
    update_loan(session, loan, loan_data)
    session.commit()
    session.refresh(loan)
    return loan


@router.post("/{loan_id}/repay", response_model=LoanRead)
def repay(loan_id: str, payment: LoanRepayment, session: Session = Depends(get_session)):
    loan = get_loan_or_404(session, loan_id)
    repay_loan(session, loan, payment)
    session.commit()
    session.refresh(loan)
    return loan
