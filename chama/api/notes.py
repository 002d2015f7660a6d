from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, select
from typing import Optional

from chama.database import get_session
from chama.models.note import Note
from chama.schemas.note import NoteCreate, NoteRead, NoteUpdate
from chama.utils.dates import utcnow

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.get("", response_model=Optional[NoteRead])
def get_note(
    admin_id: Optional[str] = Query(None, alias="adminId"),
    session: Session = Depends(get_session),
):
    if not admin_id:
        raise HTTPException(status_code=400, detail="adminId is required")
    return session.exec(select(Note).where(Note.admin_id == admin_id)).first()


@router.post("", response_model=NoteRead, status_code=201)
def create_note(note_data: NoteCreate, session: Session = Depends(get_session)):
    note = Note(admin_id=note_data.admin_id, content=note_data.content)
    session.add(note)
    session.commit()
    session.refresh(note)
    return note


@router.patch("/{note_id}", response_model=NoteRead)
def update_note(note_id: str, note_data: NoteUpdate, session: Session = Depends(get_session)):
    note = session.get(Note, note_id)
    if not note:
        raise HTTPException(status_code=404, detail="Note not found")

    note.content = note_data.content
    note.updated_at = utcnow()
    session.add(note)
    session.commit()
    session.refresh(note)
    return note
