"""Quote requests submitted from the public site. Plain CRUD, no ledger."""

from __future__ import annotations

from sqlalchemy.orm import Session

from shipco.errors import NotFound
from shipco.models._common import utcnow
from shipco.models.quote import Quote
from shipco.schemas.quote import QuoteCreate, QuoteUpdate

NEW_STATUS = "new"
# Columns a patch may not clear; an explicit null leaves them as they are.
NON_NULLABLE_FIELDS = {"status"}


def list_quotes(db: Session) -> list[Quote]:
    return db.query(Quote).order_by(Quote.createdAt.desc()).all()


def get_quote(db: Session, quote_id: str) -> Quote | None:
    return db.query(Quote).filter(Quote.id == quote_id).first()


def create_quote(db: Session, data: QuoteCreate) -> Quote:
    quote = Quote(**data.model_dump(), status=NEW_STATUS, createdAt=utcnow())
    db.add(quote)
    db.commit()
    db.refresh(quote)
    return quote


def update_quote(db: Session, quote_id: str, data: QuoteUpdate) -> Quote:
    quote = get_quote(db, quote_id)
    if not quote:
        raise NotFound(f"Quote {quote_id} not found")
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in NON_NULLABLE_FIELDS:
            continue
        setattr(quote, field, value)
    db.commit()
    db.refresh(quote)
    return quote


def delete_quote(db: Session, quote_id: str) -> None:
    db.query(Quote).filter(Quote.id == quote_id).delete()
    db.commit()
