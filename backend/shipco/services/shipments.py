"""Shipment store and its tracking-event ledger.

The ledger lives on ``Shipment.events`` as a JSON list with the newest event
first. Every mutation reassigns the list so SQLAlchemy sees the change, and
refreshes ``updatedAt``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shipco.errors import NotFound
from shipco.identifiers import new_event_id, new_tracking_number
from shipco.models._common import utcnow
from shipco.models.shipment import Shipment
from shipco.schemas.shipment import EventCreate, ShipmentCreate, ShipmentUpdate

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Created"
DEFAULT_EVENT_STATUS = "In Transit"
DEFAULT_SERVICE = "Standard"

# Fresh tracking numbers to try if an insert hits the unique constraint.
TRACKING_NUMBER_ATTEMPTS = 3

# Columns a patch may not clear; an explicit null leaves them as they are.
NON_NULLABLE_FIELDS = {"status"}


def _touch(shipment: Shipment) -> None:
    now = utcnow()
    if shipment.updatedAt is not None and shipment.updatedAt > now:
        return
    shipment.updatedAt = now


def _event_record(
    *,
    time: datetime | None,
    status: str | None,
    location: str | None,
    note: str | None,
    event_id: str | None = None,
    default_status: str = DEFAULT_EVENT_STATUS,
) -> dict[str, Any]:
    return {
        "id": event_id or new_event_id(),
        "time": (time or utcnow()).isoformat(),
        "status": status or default_status,
        "location": location or "",
        "note": note or "",
    }


def _initial_events(data: ShipmentCreate, now: datetime) -> list[dict[str, Any]]:
    if data.events:
        return [
            _event_record(
                time=ev.time or now,
                status=ev.status,
                location=ev.location,
                note=ev.note,
                event_id=ev.id,
            )
            for ev in data.events
        ]
    return [
        _event_record(
            time=now,
            status=DEFAULT_STATUS,
            location=data.origin,
            note="Shipment created",
        )
    ]


def list_shipments(db: Session) -> list[Shipment]:
    return db.query(Shipment).order_by(Shipment.createdAt.desc()).all()


def get_shipment(db: Session, shipment_id: str) -> Shipment:
    shipment = db.query(Shipment).filter(Shipment.id == shipment_id).first()
    if not shipment:
        raise NotFound(f"Shipment {shipment_id} not found")
    return shipment


def get_by_tracking_number(db: Session, tracking_number: str) -> Shipment:
    normalized = (tracking_number or "").strip().lower()
    shipment = None
    if normalized:
        shipment = (
            db.query(Shipment)
            .filter(func.lower(Shipment.trackingNumber) == normalized)
            .first()
        )
    if not shipment:
        raise NotFound(f"Tracking number {tracking_number!r} not found")
    return shipment


def create_shipment(db: Session, data: ShipmentCreate) -> Shipment:
    now = utcnow()
    for attempt in range(1, TRACKING_NUMBER_ATTEMPTS + 1):
        shipment = Shipment(
            trackingNumber=new_tracking_number(),
            customer=data.customer,
            email=data.email or "",
            origin=data.origin,
            destination=data.destination,
            service=data.service or DEFAULT_SERVICE,
            weight=data.weight or "",
            status=data.status or DEFAULT_STATUS,
            events=_initial_events(data, now),
            createdAt=now,
            updatedAt=now,
        )
        db.add(shipment)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            if attempt == TRACKING_NUMBER_ATTEMPTS:
                raise
            logger.warning(
                "Tracking number collision on %s (attempt %d), retrying",
                shipment.trackingNumber,
                attempt,
            )
            continue
        db.refresh(shipment)
        logger.info("Created shipment %s (%s)", shipment.id, shipment.trackingNumber)
        return shipment


def update_shipment(db: Session, shipment_id: str, data: ShipmentUpdate) -> Shipment:
    shipment = get_shipment(db, shipment_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in NON_NULLABLE_FIELDS:
            continue
        setattr(shipment, field, value)
    _touch(shipment)
    db.commit()
    db.refresh(shipment)
    return shipment


def append_event(db: Session, shipment_id: str, data: EventCreate) -> Shipment:
    shipment = get_shipment(db, shipment_id)
    event = _event_record(
        time=data.time,
        status=data.status,
        location=data.location,
        note=data.note,
    )
    shipment.events = [event, *(shipment.events or [])]
    if data.status:
        shipment.status = data.status
    _touch(shipment)
    db.commit()
    db.refresh(shipment)
    logger.info(
        "Appended event %s (%s) to shipment %s", event["id"], event["status"], shipment.id
    )
    return shipment


def remove_event(db: Session, shipment_id: str, event_id: str) -> Shipment:
    shipment = get_shipment(db, shipment_id)
    events = shipment.events or []
    remaining = [ev for ev in events if ev.get("id") != event_id]
    if len(remaining) != len(events):
        logger.info("Removed event %s from shipment %s", event_id, shipment.id)
    shipment.events = remaining
    _touch(shipment)
    db.commit()
    db.refresh(shipment)
    return shipment


def delete_shipment(db: Session, shipment_id: str) -> None:
    deleted = db.query(Shipment).filter(Shipment.id == shipment_id).delete()
    db.commit()
    if deleted:
        logger.info("Deleted shipment %s", shipment_id)
