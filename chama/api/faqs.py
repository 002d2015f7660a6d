from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select
from typing import List

from chama.database import get_session
from chama.models.faq import Faq
from chama.schemas.faq import FaqCreate, FaqRead, FaqUpdate

router = APIRouter(prefix="/api/faqs", tags=["faqs"])


def get_faq_or_404(session: Session, faq_id: str) -> Faq:
    faq = session.get(Faq, faq_id)
    if not faq:
        raise HTTPException(status_code=404, detail="FAQ not found")
    return faq


@router.get("", response_model=List[FaqRead])
def list_faqs(session: Session = Depends(get_session)):
    return session.exec(select(Faq)).all()


@router.get("/{faq_id}", response_model=FaqRead)
def get_faq(faq_id: str, session: Session = Depends(get_session)):
    return get_faq_or_404(session, faq_id)


@router.post("", response_model=FaqRead, status_code=201)
def create_faq(faq_data: FaqCreate, session: Session = Depends(get_session)):
    faq = Faq(**faq_data.model_dump())
    session.add(faq)
    session.commit()
    session.refresh(faq)
    return faq


@router.patch("/{faq_id}", response_model=FaqRead)
def update_faq(faq_id: str, faq_data: FaqUpdate, session: Session = Depends(get_session)):
    faq = get_faq_or_404(session, faq_id)
    for field, value in faq_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(faq, field, value)
    session.add(faq)
    session.commit()
    session.refresh(faq)
    return faq


@router.delete("/{faq_id}")
def delete_faq(faq_id: str, session: Session = Depends(get_session)):
    faq = get_faq_or_404(session, faq_id)
    session.delete(faq)
    session.commit()
    return {"success": True}
