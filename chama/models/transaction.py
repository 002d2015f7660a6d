# chama/models/transaction.py

from datetime import datetime
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from chama.models.enums import TransactionType
from chama.models.ids import new_id
from chama.utils.dates import utcnow

class Transaction(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    member_id: str = Field(index=True)
    type: TransactionType
    amount: float
    date: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    note: str = ""
    created_by: str
