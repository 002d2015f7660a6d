# chama/schemas/member.py

from datetime import date
from typing import Optional
from pydantic import EmailStr

from chama.schemas.base import CamelModel

class MemberCreate(CamelModel):
    name: str
    phone: str
    email: EmailStr
    avatar_url: Optional[str] = None
    joined_at: Optional[date] = None
    reason: str = ""

class MemberRead(CamelModel):
    id: str
    name: str
    phone: str
    email: str
    avatar_url: Optional[str] = None
    joined_at: date
    reason: str
    total_saved: float
    outstanding: float

class MemberUpdate(CamelModel):
    # Balances are owned by the ledger and cannot be patched
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    avatar_url: Optional[str] = None
    joined_at: Optional[date] = None
    reason: Optional[str] = None
