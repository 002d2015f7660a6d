import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from typing import List

from chama.core.config import DEFAULT_ACTOR_ID
from chama.database import get_session
from chama.models.enums import ActivityType
from chama.models.member import Member
from chama.schemas.member import MemberCreate, MemberRead, MemberUpdate
from chama.utils.activity_feed import append_activity
from chama.utils.member_helpers import find_member_by_email

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/members", tags=["members"])


def get_member_or_404(session: Session, member_id: str) -> Member:
    member = session.get(Member, member_id)
    if not member:
        raise HTTPException(status_code=404, detail="Member not found")
    return member


@router.get("", response_model=List[MemberRead])
def list_members(session: Session = Depends(get_session)):
    return session.exec(select(Member)).all()


@router.get("/{member_id}", response_model=MemberRead)
def get_member(member_id: str, session: Session = Depends(get_session)):
    return get_member_or_404(session, member_id)


@router.post("", response_model=MemberRead, status_code=201)
def create_member(member_data: MemberCreate, session: Session = Depends(get_session)):
    if find_member_by_email(session, member_data.email):
        raise HTTPException(status_code=400, detail="Email already exists")

    values = member_data.model_dump(exclude_none=True)
    member = Member(**values)
    session.add(member)
    append_activity(session, ActivityType.member_added, f"New member added: {member.name}", DEFAULT_ACTOR_ID)
    session.commit()
    session.refresh(member)

    logger.info("Member %s added", member.id)
    return member


@router.patch("/{member_id}", response_model=MemberRead)
def update_member(member_id: str, member_data: MemberUpdate, session: Session = Depends(get_session)):
    member = get_member_or_404(session, member_id)

    changes = member_data.model_dump(exclude_unset=True)
    if changes.get("email") and find_member_by_email(session, changes["email"], exclude_id=member.id):
        raise HTTPException(status_code=400, detail="Email already exists")

    for field, value in changes.items():
        if value is None and field != "avatar_url":
            continue  # only the avatar can be cleared
        setattr(member, field, value)

    session.add(member)
    session.commit()
    session.refresh(member)
    return member


@router.delete("/{member_id}")
def delete_member(member_id: str, session: Session = Depends(get_session)):
    member = get_member_or_404(session, member_id)

    session.delete(member)
    append_activity(session, ActivityType.member_deleted, f"Member deleted: {member.name}", DEFAULT_ACTOR_ID)
    session.commit()

    logger.info("Member %s deleted", member_id)
    return {"success": True}
