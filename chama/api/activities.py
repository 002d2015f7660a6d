from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import List

from chama.core.config import ACTIVITY_CAPACITY
from chama.database import get_session
from chama.schemas.activity import ActivityRead
from chama.utils.activity_feed import recent_activities

router = APIRouter(prefix="/api/activities", tags=["activities"])


@router.get("", response_model=List[ActivityRead])
def list_activities(
    limit: int = Query(10, ge=1, description="Number of entries, newest first"),
    session: Session = Depends(get_session),
):
    # The feed never holds more than its capacity, so larger limits just return everything
    return recent_activities(session, min(limit, ACTIVITY_CAPACITY))
