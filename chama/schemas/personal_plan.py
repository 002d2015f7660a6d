# chama/schemas/personal_plan.py

from typing import List, Literal, Optional
from pydantic import Field

from chama.models.ids import new_id
from chama.schemas.base import CamelModel

class SpendingCategory(CamelModel):
    id: str = Field(default_factory=new_id)
    name: str
    planned_amount: float = Field(default=0.0, ge=0)
    actual_amount: float = Field(default=0.0, ge=0)

class PersonalPlanCreate(CamelModel):
    admin_id: str
    weekly_income: float = Field(default=0.0, ge=0)
    categories: List[SpendingCategory] = []
    personal_savings: float = 0.0

class PersonalPlanRead(CamelModel):
    id: str
    admin_id: str
    weekly_income: float
    categories: List[SpendingCategory]
    personal_savings: float

class PersonalPlanUpdate(CamelModel):
    weekly_income: Optional[float] = Field(default=None, ge=0)
    categories: Optional[List[SpendingCategory]] = None
    personal_savings: Optional[float] = None

class CategoryUsage(CamelModel):
    id: str
    name: str
    planned_amount: float
    actual_amount: float
    percentage: float
    status: Literal["on_track", "at_limit", "over"]

class PersonalPlanSummary(CamelModel):
    plan_id: str
    weekly_income: float
    total_planned: float
    total_actual: float
    remaining: float
    personal_savings: float
    categories: List[CategoryUsage]
    top_categories: List[CategoryUsage]
    top_category_share: float
