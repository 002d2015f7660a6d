from typing import Optional
from pydantic import Field

from chama.schemas.base import CamelModel

class SettingsCreate(CamelModel):
    target_amount: float = Field(..., gt=0)
    target_period_months: int = Field(..., gt=0)
    daily_minimum: float = Field(default=0.0, ge=0)
    global_interest_rate: float = Field(default=0.0, ge=0)
    require_password_for_sensitive_actions: bool = False

class SettingsRead(SettingsCreate):
    id: str

class SettingsUpdate(CamelModel):
    target_amount: Optional[float] = Field(default=None, gt=0)
    target_period_months: Optional[int] = Field(default=None, gt=0)
    daily_minimum: Optional[float] = Field(default=None, ge=0)
    global_interest_rate: Optional[float] = Field(default=None, ge=0)
    require_password_for_sensitive_actions: Optional[bool] = None
