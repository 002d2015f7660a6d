from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select
from typing import Optional

from chama.database import get_session
from chama.models.personal_plan import PersonalPlan
from chama.schemas.personal_plan import PersonalPlanCreate, PersonalPlanRead, PersonalPlanSummary, PersonalPlanUpdate
from chama.utils.plan_helpers import summarize_plan

router = APIRouter(prefix="/api/personal-plan", tags=["personal_plan"])


def get_plan_or_404(session: Session, plan_id: str) -> PersonalPlan:
    plan = session.get(PersonalPlan, plan_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Personal plan not found")
    return plan


@router.get("", response_model=Optional[PersonalPlanRead])
def get_personal_plan(
    admin_id: Optional[str] = Query(None, alias="adminId"),
    session: Session = Depends(get_session),
):
    if not admin_id:
        raise HTTPException(status_code=400, detail="adminId is required")
    # One plan per admin by convention; the first one wins
    return session.exec(select(PersonalPlan).where(PersonalPlan.admin_id == admin_id)).first()


@router.post("", response_model=PersonalPlanRead, status_code=201)
def create_personal_plan(plan_data: PersonalPlanCreate, session: Session = Depends(get_session)):
    plan = PersonalPlan(
        admin_id=plan_data.admin_id,
        weekly_income=plan_data.weekly_income,
        categories=[c.model_dump() for c in plan_data.categories],
        personal_savings=plan_data.personal_savings,
    )
    session.add(plan)
    session.commit()
    session.refresh(plan)
    return plan


@router.patch("/{plan_id}", response_model=PersonalPlanRead)
def update_personal_plan(plan_id: str, plan_data: PersonalPlanUpdate, session: Session = Depends(get_session)):
    plan = get_plan_or_404(session, plan_id)

    if plan_data.weekly_income is not None:
        plan.weekly_income = plan_data.weekly_income
    if plan_data.personal_savings is not None:
        plan.personal_savings = plan_data.personal_savings
    if plan_data.categories is not None:
        plan.categories = [c.model_dump() for c in plan_data.categories]

    session.add(plan)
    session.commit()
    session.refresh(plan)
    return plan


@router.get("/{plan_id}/summary", response_model=PersonalPlanSummary)
def get_personal_plan_summary(plan_id: str, session: Session = Depends(get_session)):
    return summarize_plan(get_plan_or_404(session, plan_id))
