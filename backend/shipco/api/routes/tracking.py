"""Public tracking-number lookup. No token required."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shipco.database import get_db
from shipco.schemas.shipment import ShipmentResponse
from shipco.services.shipments import get_by_tracking_number

router = APIRouter(prefix="/api/track", tags=["tracking"])


@router.get("/{tracking_number}", response_model=ShipmentResponse)
def track(tracking_number: str, db: Session = Depends(get_db)):
    return get_by_tracking_number(db, tracking_number)
