# chama/models/member.py

from datetime import date
from typing import Optional
from sqlmodel import SQLModel, Field

from chama.models.ids import new_id

class Member(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    name: str
    phone: str
    email: str = Field(index=True, unique=True)
    avatar_url: Optional[str] = None
    joined_at: date = Field(default_factory=date.today)
    reason: str = ""  # Why the member is saving, e.g. "School fees"
    total_saved: float = 0.0
    outstanding: float = 0.0  # Sum of unpaid loan balances
