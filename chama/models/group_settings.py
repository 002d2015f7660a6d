# chama/models/group_settings.py

from sqlmodel import SQLModel, Field

from chama.models.ids import new_id

class GroupSettings(SQLModel, table=True):
    """Singleton configuration of the savings group."""
    __tablename__ = "settings"

    id: str = Field(default_factory=new_id, primary_key=True)
    target_amount: float
    target_period_months: int
    daily_minimum: float = 0.0
    global_interest_rate: float = 0.0
    require_password_for_sensitive_actions: bool = Field(default=False)
