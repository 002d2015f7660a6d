# chama/models/activity.py

from datetime import datetime
from typing import Optional
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from chama.models.enums import ActivityType
from chama.models.ids import new_id
from chama.utils.dates import utcnow

class Activity(SQLModel, table=True):
    # seq gives the feed a strict append order; id is the public identifier
    seq: Optional[int] = Field(default=None, primary_key=True)
    id: str = Field(default_factory=new_id, index=True, unique=True)
    type: ActivityType
    description: str
    timestamp: datetime = Field(default_factory=utcnow, sa_type=DateTime)
    actor_id: str
