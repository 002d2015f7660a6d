from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from typing import List, Optional

from chama.core.security import get_password_hash, verify_password
from chama.database import get_session
from chama.models.admin import Admin
from chama.schemas.admin import AdminCreate, AdminRead, AdminUpdate, PasswordCheck, PasswordCheckResult

router = APIRouter(prefix="/api/admins", tags=["admins"])


def get_admin_or_404(session: Session, admin_id: str) -> Admin:
    admin = session.get(Admin, admin_id)
    if not admin:
        raise HTTPException(status_code=404, detail="Admin not found")
    return admin


def email_taken(session: Session, email: str, exclude_id: Optional[str] = None) -> bool:
    query = select(Admin.id).where(Admin.email == email)
    if exclude_id:
        query = query.where(Admin.id != exclude_id)
    return session.exec(query.limit(1)).first() is not None


@router.get("", response_model=List[AdminRead])
def list_admins(session: Session = Depends(get_session)):
    return session.exec(select(Admin)).all()


@router.post("", response_model=AdminRead, status_code=201)
def create_admin(admin_data: AdminCreate, session: Session = Depends(get_session)):
    if email_taken(session, admin_data.email):
        raise HTTPException(status_code=400, detail="Email already exists")

    values = admin_data.model_dump(exclude={"password"})
    admin = Admin(**values, hashed_password=get_password_hash(admin_data.password))
    session.add(admin)
    session.commit()
    session.refresh(admin)
    return admin


@router.patch("/{admin_id}", response_model=AdminRead)
def update_admin(admin_id: str, admin_data: AdminUpdate, session: Session = Depends(get_session)):
    admin = get_admin_or_404(session, admin_id)

    changes = admin_data.model_dump(exclude_unset=True)
    if changes.get("email") and email_taken(session, changes["email"], exclude_id=admin.id):
        raise HTTPException(status_code=400, detail="Email already exists")

    password = changes.pop("password", None)
    if password:
        admin.hashed_password = get_password_hash(password)
    for field, value in changes.items():
        if value is None and field != "avatar_url":
            continue
        setattr(admin, field, value)

    session.add(admin)
    session.commit()
    session.refresh(admin)
    return admin


@router.delete("/{admin_id}")
def delete_admin(admin_id: str, session: Session = Depends(get_session)):
    admin = get_admin_or_404(session, admin_id)
    session.delete(admin)
    session.commit()
    return {"success": True}


@router.post("/{admin_id}/verify-password", response_model=PasswordCheckResult)
def check_admin_password(admin_id: str, check: PasswordCheck, session: Session = Depends(get_session)):
    # Used by the UI before sensitive actions when the group settings ask for it
    admin = get_admin_or_404(session, admin_id)
    return PasswordCheckResult(valid=verify_password(check.password, admin.hashed_password))
