from typing import Optional

from chama.schemas.base import CamelModel

class FaqCreate(CamelModel):
    question: str
    answer: str

class FaqRead(FaqCreate):
    id: str

class FaqUpdate(CamelModel):
    question: Optional[str] = None
    answer: Optional[str] = None
