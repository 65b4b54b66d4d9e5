"""Seed demo shipments if the store is empty. Called from startup or manually."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session, sessionmaker

from shipco.models.shipment import Shipment
from shipco.schemas.shipment import EventIn, ShipmentCreate
from shipco.services.shipments import create_shipment

logger = logging.getLogger(__name__)

SEED_SHIPMENTS = [
    ShipmentCreate(
        customer="Acme Corp",
        email="ops@acme.com",
        origin="Los Angeles",
        destination="Tokyo",
        service="Air",
        weight="250",
        status="In Transit",
        # Newest first, like every ledger.
        events=[
            EventIn(status="In Transit", location="Honolulu, US", note="Departed via air"),
            EventIn(status="Created", location="Los Angeles, US", note="Shipment created"),
        ],
    ),
    ShipmentCreate(
        customer="Beta LLC",
        email="logistics@beta.com",
        origin="Hamburg",
        destination="New York",
        service="Ocean",
        weight="1200",
        status="Created",
        events=[
            EventIn(status="Created", location="Hamburg, DE", note="Booking confirmed"),
        ],
    ),
]


def seed_shipments_if_empty(db: Session) -> int:
    if db.query(Shipment).count() > 0:
        return 0
    for data in SEED_SHIPMENTS:
        create_shipment(db, data)
    logger.info("Seeded %d demo shipments", len(SEED_SHIPMENTS))
    return len(SEED_SHIPMENTS)


def seed_all_if_empty(session_factory: sessionmaker) -> None:
    db = session_factory()
    try:
        seed_shipments_if_empty(db)
    finally:
        db.close()
