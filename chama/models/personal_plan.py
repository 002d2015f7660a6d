# chama/models/personal_plan.py

from typing import List
from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field

from chama.models.ids import new_id

class PersonalPlan(SQLModel, table=True):
    __tablename__ = "personal_plan"

    id: str = Field(default_factory=new_id, primary_key=True)
    admin_id: str = Field(index=True)
    weekly_income: float = 0.0
    # [{"id", "name", "planned_amount", "actual_amount"}]; reassign the list to persist changes
    categories: List[dict] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    personal_savings: float = 0.0
