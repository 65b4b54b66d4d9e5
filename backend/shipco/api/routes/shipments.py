"""Operator shipment management and the tracking-event ledger endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from shipco.api.deps import get_current_admin
from shipco.database import get_db
from shipco.schemas.shipment import (
    EventCreate,
    ShipmentCreate,
    ShipmentResponse,
    ShipmentUpdate,
)
from shipco.services.shipments import (
    append_event,
    create_shipment,
    delete_shipment,
    get_shipment,
    list_shipments,
    remove_event,
    update_shipment,
)

router = APIRouter(
    prefix="/api/shipments",
    tags=["shipments"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("", response_model=list[ShipmentResponse])
def list_all(db: Session = Depends(get_db)):
    return list_shipments(db)


@router.post("", response_model=ShipmentResponse, status_code=status.HTTP_201_CREATED)
def create(dto: ShipmentCreate, db: Session = Depends(get_db)):
    return create_shipment(db, dto)


@router.get("/{shipment_id}", response_model=ShipmentResponse)
def get_one(shipment_id: str, db: Session = Depends(get_db)):
    return get_shipment(db, shipment_id)


@router.patch("/{shipment_id}", response_model=ShipmentResponse)
def update(shipment_id: str, dto: ShipmentUpdate, db: Session = Depends(get_db)):
    return update_shipment(db, shipment_id, dto)


@router.delete("/{shipment_id}")
def delete(shipment_id: str, db: Session = Depends(get_db)):
    delete_shipment(db, shipment_id)
    return {"ok": True}


@router.post(
    "/{shipment_id}/events",
    response_model=ShipmentResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_event(
    shipment_id: str,
    dto: EventCreate | None = None,
    db: Session = Depends(get_db),
):
    return append_event(db, shipment_id, dto or EventCreate())


@router.delete("/{shipment_id}/events/{event_id}", response_model=ShipmentResponse)
def delete_event(shipment_id: str, event_id: str, db: Session = Depends(get_db)):
    return remove_event(db, shipment_id, event_id)
