from sqlmodel import SQLModel, Field

from chama.models.ids import new_id

class Faq(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    question: str
    answer: str
