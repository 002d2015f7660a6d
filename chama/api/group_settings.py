# chama/api/group_settings.py

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from typing import Optional

from chama.database import get_session
from chama.models.group_settings import GroupSettings
from chama.schemas.group_settings import SettingsCreate, SettingsRead, SettingsUpdate

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("", response_model=Optional[SettingsRead])
def get_settings(session: Session = Depends(get_session)):
    return session.exec(select(GroupSettings)).first()


@router.post("", response_model=SettingsRead, status_code=201)
def create_settings(settings_data: SettingsCreate, session: Session = Depends(get_session)):
    # Singleton: a new record replaces whatever was active
    for old in session.exec(select(GroupSettings)).all():
        session.delete(old)

    settings = GroupSettings(**settings_data.model_dump())
    session.add(settings)
    session.commit()
    session.refresh(settings)
    return settings


@router.patch("/{settings_id}", response_model=SettingsRead)
def update_settings(settings_id: str, settings_data: SettingsUpdate, session: Session = Depends(get_session)):
    settings = session.get(GroupSettings, settings_id)
    if not settings:
        raise HTTPException(status_code=404, detail="Settings not found")

    for field, value in settings_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(settings, field, value)

    session.add(settings)
    session.commit()
    session.refresh(settings)
    return settings
