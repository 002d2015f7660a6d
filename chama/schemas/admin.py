from typing import Optional
from pydantic import EmailStr

from chama.schemas.base import CamelModel

class AdminCreate(CamelModel):
    name: str
    email: EmailStr
    phone: str
    avatar_url: Optional[str] = None
    password: str

class AdminRead(CamelModel):
    # No password field: responses never carry credentials
    id: str
    name: str
    email: str
    phone: str
    avatar_url: Optional[str] = None

class AdminUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    password: Optional[str] = None

class PasswordCheck(CamelModel):
    password: str

class PasswordCheckResult(CamelModel):
    valid: bool
