# chama/api/dashboard.py

from fastapi import APIRouter, Depends
from sqlmodel import Session

from chama.database import get_session
from chama.schemas.dashboard import DashboardStats
from chama.utils.stats import dashboard_stats

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(session: Session = Depends(get_session)):
    return dashboard_stats(session)
