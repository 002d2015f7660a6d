import logging
from typing import Optional

from fastapi import HTTPException
from sqlmodel import Session, select

from chama.core.config import DEFAULT_ACTOR_ID
from chama.models.enums import ActivityType, LoanStatus, TransactionType
from chama.models.group_settings import GroupSettings
from chama.models.loan import Loan
from chama.models.member import Member
from chama.models.transaction import Transaction
from chama.schemas.loan import LoanCreate, LoanRepayment, LoanUpdate
from chama.schemas.transaction import TransactionCreate
from chama.utils.activity_feed import append_activity
from chama.utils.dates import normalize_dt
from chama.utils.member_helpers import get_member_or_400, update_member_balance
from chama.utils.money import format_amount

logger = logging.getLogger(__name__)

# Repayments within a cent of the balance are treated as settling it
EPS = 0.01

_ACTIVITY_BY_TYPE = {
    TransactionType.deposit: ActivityType.deposit,
    TransactionType.withdraw: ActivityType.withdraw,
    # money leaves the pool when a loan is paid out
    TransactionType.loan_disbursement: ActivityType.withdraw,
    TransactionType.loan_repayment: ActivityType.loan_repayment,
}

_VERB_BY_TYPE = {
    TransactionType.deposit: "deposited",
    TransactionType.withdraw: "withdrew",
    TransactionType.loan_disbursement: "received a loan disbursement of",
    TransactionType.loan_repayment: "made a loan repayment of",
}


def simple_interest_total(principal: float, interest_rate: float) -> float:
    return principal + principal * interest_rate / 100


def create_transaction(session: Session, data: TransactionCreate) -> Transaction:
    """Books a transaction and applies it to the member's savings.

    Deposits add to total_saved, withdrawals subtract from it. There is no
    floor: a withdrawal larger than the balance leaves it negative. Loan
    transactions are recorded without touching total_saved.
    """
    member = get_member_or_400(session, data.member_id)

    tx = Transaction(
        member_id=member.id,
        type=data.type,
        amount=data.amount,
        date=normalize_dt(data.date),
        note=data.note,
        created_by=data.created_by or DEFAULT_ACTOR_ID,
    )
    session.add(tx)

    if tx.type == TransactionType.deposit:
        update_member_balance(session, member, saved_delta=tx.amount)
    elif tx.type == TransactionType.withdraw:
        update_member_balance(session, member, saved_delta=-tx.amount)
        if member.total_saved < 0:
            logger.warning(
                "Withdrawal %s left member %s with a negative balance (%.2f)",
                tx.id, member.id, member.total_saved,
            )

    append_activity(
        session,
        _ACTIVITY_BY_TYPE[tx.type],
        f"{member.name} {_VERB_BY_TYPE[tx.type]} {format_amount(tx.amount)}",
        tx.created_by,
    )
    return tx


def create_loan(session: Session, data: LoanCreate) -> Loan:
    member = get_member_or_400(session, data.member_id)
    actor_id = data.created_by or DEFAULT_ACTOR_ID

    interest_rate = data.interest_rate
    if interest_rate is None:
        settings = session.exec(select(GroupSettings)).first()
        interest_rate = settings.global_interest_rate if settings else 0.0

    loan = Loan(
        member_id=member.id,
        principal=data.principal,
        interest_rate=interest_rate,
        outstanding=simple_interest_total(data.principal, interest_rate),
        status=LoanStatus.active,
    )
    session.add(loan)

    # Disbursement is a ledger entry only; it never counts as savings
    create_transaction(
        session,
        TransactionCreate(
            member_id=member.id,
            type=TransactionType.loan_disbursement,
            amount=loan.principal,
            note="Loan disbursement",
            created_by=actor_id,
        ),
    )
    update_member_balance(session, member, outstanding_delta=loan.outstanding)

    append_activity(
        session,
        ActivityType.loan_approved,
        f"Loan approved for {member.name} - {format_amount(loan.principal)}",
        actor_id,
    )
    logger.info("Loan %s approved for member %s: outstanding %.2f", loan.id, member.id, loan.outstanding)
    return loan


def get_loan_or_404(session: Session, loan_id: str) -> Loan:
    loan = session.get(Loan, loan_id)
    if not loan:
        raise HTTPException(status_code=404, detail="Loan not found")
    return loan


def update_loan(session: Session, loan: Loan, data: LoanUpdate, actor_id: Optional[str] = None) -> Loan:
    """Patches a loan, carrying outstanding changes over to its member.

    The new outstanding is trusted as given; the difference to the previous
    value is taken off the member's outstanding. Reaching exactly zero marks
    the loan paid, and any decrease is logged as a repayment.
    """
    changes = data.model_dump(exclude_unset=True)
    previous_outstanding = loan.outstanding

    if changes.get("status") is not None:
        loan.status = changes["status"]

    if changes.get("outstanding") is not None:
        new_outstanding = changes["outstanding"]
        loan.outstanding = new_outstanding
        if new_outstanding == 0:
            loan.status = LoanStatus.paid

        member = session.get(Member, loan.member_id)
        repaid = previous_outstanding - new_outstanding
        if member:
            update_member_balance(session, member, outstanding_delta=-repaid)
        else:
            logger.warning("Loan %s belongs to missing member %s", loan.id, loan.member_id)

        if new_outstanding < previous_outstanding:
            append_activity(
                session,
                ActivityType.loan_repayment,
                f"{member.name if member else 'Member'} repaid {format_amount(repaid)} towards loan",
                actor_id or DEFAULT_ACTOR_ID,
            )
            logger.info("Loan %s repaid %.2f, %.2f left", loan.id, repaid, new_outstanding)

    session.add(loan)
    return loan


def repay_loan(session: Session, loan: Loan, payment: LoanRepayment) -> Loan:
    if loan.status == LoanStatus.paid:
        raise HTTPException(status_code=400, detail="Loan is already paid")
    if payment.amount - loan.outstanding > EPS:
        raise HTTPException(
            status_code=400,
            detail=f"Repayment ({payment.amount}) exceeds the outstanding balance ({loan.outstanding})",
        )

    actor_id = payment.created_by or DEFAULT_ACTOR_ID
    member = session.get(Member, loan.member_id)
    if member:
        tx = Transaction(
            member_id=member.id,
            type=TransactionType.loan_repayment,
            amount=payment.amount,
            date=normalize_dt(None),
            note=payment.note or "Loan repayment",
            created_by=actor_id,
        )
        session.add(tx)

    new_outstanding = loan.outstanding - payment.amount
    if new_outstanding <= EPS:
        new_outstanding = 0.0
    return update_loan(session, loan, LoanUpdate(outstanding=new_outstanding), actor_id=actor_id)
