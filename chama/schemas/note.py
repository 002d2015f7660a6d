from datetime import datetime

from chama.schemas.base import CamelModel

class NoteCreate(CamelModel):
    admin_id: str
    content: str = ""

class NoteRead(CamelModel):
    id: str
    admin_id: str
    content: str
    updated_at: datetime

class NoteUpdate(CamelModel):
    content: str
