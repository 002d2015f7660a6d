# chama/schemas/dashboard.py

from datetime import date
from typing import List, Optional

from chama.schemas.base import CamelModel

class PendingDeposit(CamelModel):
    id: str
    name: str
    missed_dates: str
    amount: float

class DailyContribution(CamelModel):
    date: date
    amount: float

class TopContributor(CamelModel):
    id: str
    name: str
    total_saved: float

class DashboardStats(CamelModel):
    active_members: int
    total_savings: float
    pending_total: float
    target_progress: float
    pending_deposits: List[PendingDeposit]
    weekly_contributions: List[DailyContribution]
    top_contributor: Optional[TopContributor] = None
