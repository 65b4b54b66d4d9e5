from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shipco.api.deps import get_current_admin
from shipco.database import get_db
from shipco.schemas.auth import SessionClaims
from shipco.schemas.quote import QuoteCreate, QuoteResponse, QuoteUpdate
from shipco.services.quotes import create_quote, delete_quote, list_quotes, update_quote

router = APIRouter(prefix="/api/quotes", tags=["quotes"])


@router.post("", response_model=QuoteResponse, status_code=status.HTTP_201_CREATED)
def create(dto: QuoteCreate, db: Session = Depends(get_db)):
    return create_quote(db, dto)


@router.get("", response_model=list[QuoteResponse])
def list_all(
    db: Session = Depends(get_db),
    _: SessionClaims = Depends(get_current_admin),
):
    return list_quotes(db)


@router.patch("/{quote_id}", response_model=QuoteResponse)
def update(
    quote_id: str,
    dto: QuoteUpdate,
    db: Session = Depends(get_db),
    _: SessionClaims = Depends(get_current_admin),
):
    return update_quote(db, quote_id, dto)


@router.delete("/{quote_id}")
def delete(
    quote_id: str,
    db: Session = Depends(get_db),
    _: SessionClaims = Depends(get_current_admin),
):
    delete_quote(db, quote_id)
    return {"ok": True}
