# chama/utils/stats.py

from datetime import datetime, timedelta
from typing import List, Optional

from sqlmodel import Session, select

from chama.models.enums import TransactionType
from chama.models.group_settings import GroupSettings
from chama.models.member import Member
from chama.models.transaction import Transaction
from chama.schemas.dashboard import DailyContribution, DashboardStats, PendingDeposit, TopContributor
from chama.schemas.report import ReportSummary
from chama.utils.dates import utcnow

MISSED_DEPOSIT_WINDOW = timedelta(days=2)
DEFAULT_DAILY_MINIMUM = 50


def dashboard_stats(session: Session, now: Optional[datetime] = None) -> DashboardStats:
    now = now or utcnow()
    members = session.exec(select(Member)).all()
    transactions = session.exec(select(Transaction)).all()
    settings = session.exec(select(GroupSettings)).first()

    total_savings = sum(m.total_saved for m in members)
    pending_total = sum(m.outstanding for m in members)
    target_progress = total_savings / settings.target_amount * 100 if settings else 0

    deposits = [t for t in transactions if t.type == TransactionType.deposit]

    # Members without a deposit in the window are flagged for follow-up
    window_start = now - MISSED_DEPOSIT_WINDOW
    recent_depositors = {t.member_id for t in deposits if t.date >= window_start}
    daily_minimum = settings.daily_minimum if settings and settings.daily_minimum else DEFAULT_DAILY_MINIMUM
    pending_deposits = [
        PendingDeposit(id=m.id, name=m.name, missed_dates="Last 2 days", amount=daily_minimum)
        for m in members
        if m.id not in recent_depositors
    ]

    return DashboardStats(
        active_members=len(members),
        total_savings=total_savings,
        pending_total=pending_total,
        target_progress=round(target_progress, 1),
        pending_deposits=pending_deposits,
        weekly_contributions=weekly_contributions(deposits, now),
        top_contributor=top_contributor(members),
    )


def weekly_contributions(deposits: List[Transaction], now: datetime) -> List[DailyContribution]:
    """Deposit totals for the last seven days, oldest first."""
    today = now.date()
    days = [today - timedelta(days=offset) for offset in range(6, -1, -1)]
    totals = {day: 0.0 for day in days}
    for t in deposits:
        day = t.date.date()
        if day in totals:
            totals[day] += t.amount
    return [DailyContribution(date=day, amount=totals[day]) for day in days]


def top_contributor(members: List[Member]) -> Optional[TopContributor]:
    if not members:
        return None
    best = max(members, key=lambda m: m.total_saved)
    return TopContributor(id=best.id, name=best.name, total_saved=best.total_saved)


def report_summary(session: Session) -> ReportSummary:
    transactions = session.exec(select(Transaction)).all()
    total_deposits = sum(t.amount for t in transactions if t.type == TransactionType.deposit)
    total_withdrawals = sum(t.amount for t in transactions if t.type == TransactionType.withdraw)
    return ReportSummary(
        total_deposits=total_deposits,
        total_withdrawals=total_withdrawals,
        net_savings=total_deposits - total_withdrawals,
        transaction_count=len(transactions),
    )
