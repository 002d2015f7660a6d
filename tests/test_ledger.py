from datetime import datetime, timedelta, timezone

import pytest
from fastapi import HTTPException
from sqlmodel import select

from chama.models.activity import Activity
from chama.models.enums import ActivityType, LoanStatus, TransactionType
from chama.models.loan import Loan
from chama.models.member import Member
from chama.models.transaction import Transaction
from chama.schemas.loan import LoanCreate, LoanUpdate
from chama.schemas.transaction import TransactionCreate
from chama.utils import ledger
from chama.utils.dates import normalize_dt
from chama.utils.money import format_amount


def test_format_amount():
    assert format_amount(500) == "KES 500"
    assert format_amount(1050) == "KES 1,050"
    assert format_amount(1234.5) == "KES 1,234.5"
    assert format_amount(0.25) == "KES 0.25"


def test_simple_interest_total():
    assert ledger.simple_interest_total(1000, 5) == 1050
    assert ledger.simple_interest_total(1000, 0) == 1000


def test_loan_transactions_do_not_touch_savings(session):
    for type_ in (TransactionType.loan_disbursement, TransactionType.loan_repayment):
        ledger.create_transaction(session, TransactionCreate(member_id="m_03", type=type_, amount=400))
    session.commit()
    assert session.get(Member, "m_03").total_saved == 15200

    types = [a.type for a in session.exec(select(Activity).order_by(Activity.seq)).all()]
    assert types == [ActivityType.withdraw, ActivityType.loan_repayment]


def test_create_transaction_rejects_unknown_member(session):
    with pytest.raises(HTTPException) as exc:
        ledger.create_transaction(
            session, TransactionCreate(member_id="ghost", type=TransactionType.deposit, amount=1)
        )
    assert exc.value.status_code == 400


def test_create_loan_is_one_unit_of_work(session):
    loan = ledger.create_loan(session, LoanCreate(member_id="m_02", principal=1000, interest_rate=5))
    session.commit()

    assert session.get(Loan, loan.id).outstanding == 1050
    assert session.get(Member, "m_02").outstanding == 1050
    disbursement = session.exec(select(Transaction)).one()
    assert disbursement.type == TransactionType.loan_disbursement
    assert disbursement.amount == 1000


def test_update_loan_on_deleted_member_still_marks_paid(session):
    loan = ledger.create_loan(session, LoanCreate(member_id="m_02", principal=500, interest_rate=0))
    session.commit()
    session.delete(session.get(Member, "m_02"))
    session.commit()

    ledger.update_loan(session, loan, LoanUpdate(outstanding=0))
    session.commit()

    assert session.get(Loan, loan.id).status == LoanStatus.paid
    latest = session.exec(select(Activity).order_by(Activity.seq.desc())).first()
    assert latest.description == "Member repaid KES 500 towards loan"


def test_timestamps_are_stored_as_naive_utc():
    for column in (Transaction.__table__.c.date, Loan.__table__.c.created_at, Activity.__table__.c.timestamp):
        assert column.type.timezone is False


def test_normalize_dt():
    aware = datetime(2026, 1, 5, 10, 0, tzinfo=timezone(timedelta(hours=3)))
    assert normalize_dt(aware) == datetime(2026, 1, 5, 7, 0)
    assert normalize_dt(datetime(2026, 1, 5, 7, 0)) == datetime(2026, 1, 5, 7, 0)
    assert normalize_dt(None).tzinfo is None


def test_dated_deposit_round_trips_through_store(session):
    tx = ledger.create_transaction(
        session,
        TransactionCreate(
            member_id="m_01",
            type=TransactionType.deposit,
            amount=500,
            date=datetime(2026, 3, 1, 8, 30, tzinfo=timezone.utc),
        ),
    )
    session.commit()
    stored = session.get(Transaction, tx.id)
    assert stored.date == datetime(2026, 3, 1, 8, 30)
    assert session.get(Member, "m_01").total_saved == 12800
