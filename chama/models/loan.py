# chama/models/loan.py

from datetime import datetime
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from chama.models.enums import LoanStatus
from chama.models.ids import new_id
from chama.utils.dates import utcnow

class Loan(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    member_id: str = Field(index=True)
    principal: float
    interest_rate: float  # Simple interest, in percent
    outstanding: float  # principal + interest - repayments
    status: LoanStatus = Field(default=LoanStatus.active)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
