from datetime import datetime
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from chama.models.ids import new_id
from chama.utils.dates import utcnow

class Note(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    admin_id: str = Field(index=True)
    content: str = ""
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime)
