from typing import Optional
from sqlmodel import SQLModel, Field

from chama.models.ids import new_id

class Admin(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    phone: str
    avatar_url: Optional[str] = None
    hashed_password: str
