from datetime import datetime

from chama.models.enums import ActivityType
from chama.schemas.base import CamelModel

class ActivityRead(CamelModel):
    id: str
    type: ActivityType
    description: str
    timestamp: datetime
    actor_id: str
