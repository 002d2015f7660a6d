from datetime import datetime
from typing import Annotated, Optional
from pydantic import Field

from chama.models.enums import TransactionType
from chama.schemas.base import CamelModel

class TransactionCreate(CamelModel):
    member_id: str
    type: TransactionType
    amount: Annotated[float, Field(gt=0, description="Amount in the group currency")]
    date: Optional[datetime] = None
    note: str = ""
    created_by: Optional[str] = None

class TransactionRead(CamelModel):
    id: str
    member_id: str
    type: TransactionType
    amount: float
    date: datetime
    note: str
    created_by: str
