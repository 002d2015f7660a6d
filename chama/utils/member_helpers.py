from typing import Optional

from fastapi import HTTPException
from sqlmodel import Session, select

from chama.models.member import Member


def get_member_or_400(session: Session, member_id: str) -> Member:
    # Mutations refuse to book against a member that does not exist
    member = session.get(Member, member_id)
    if not member:
        raise HTTPException(status_code=400, detail=f"Member {member_id} not found")
    return member


def find_member_by_email(session: Session, email: str, exclude_id: Optional[str] = None) -> Optional[Member]:
    query = select(Member).where(Member.email == email)
    if exclude_id:
        query = query.where(Member.id != exclude_id)
    return session.exec(query).first()


def update_member_balance(session: Session, member: Member, saved_delta: float = 0.0, outstanding_delta: float = 0.0):
    member.total_saved += saved_delta
    member.outstanding += outstanding_delta
    session.add(member)  # Required so the session tracks the change
