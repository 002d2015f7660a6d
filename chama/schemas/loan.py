# chama/schemas/loan.py

from datetime import datetime
from typing import Optional
from pydantic import Field

from chama.models.enums import LoanStatus
from chama.schemas.base import CamelModel

class LoanCreate(CamelModel):
    member_id: str
    principal: float = Field(..., gt=0)
    # Falls back to the group's global interest rate
    interest_rate: Optional[float] = Field(default=None, ge=0)
    created_by: Optional[str] = None

class LoanRead(CamelModel):
    id: str
    member_id: str
    principal: float
    interest_rate: float
    outstanding: float
    status: LoanStatus
    created_at: datetime

class LoanUpdate(CamelModel):
    outstanding: Optional[float] = Field(default=None, ge=0)
    status: Optional[LoanStatus] = None

class LoanRepayment(CamelModel):
    amount: float = Field(..., gt=0)
    note: Optional[str] = None
    created_by: Optional[str] = None
