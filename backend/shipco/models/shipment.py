"""Freight shipment with its embedded tracking-event ledger (newest first)."""

from sqlalchemy import JSON, Column, DateTime, String

from shipco.database import Base
from shipco.models._common import new_id, utcnow


class Shipment(Base):
    __tablename__ = "shipments"

    id = Column(String(32), primary_key=True, default=new_id)
    trackingNumber = Column(String(64), unique=True, nullable=False, index=True)

    customer = Column(String, nullable=True)
    email = Column(String, nullable=True)
    origin = Column(String, nullable=True)
    destination = Column(String, nullable=True)
    service = Column(String, nullable=True)
    weight = Column(String, nullable=True)

    status = Column(String(100), nullable=False, default="Created")
    # List of {id, time, status, location, note}; index 0 is the latest event.
    events = Column(JSON, nullable=False, default=list)

    createdAt = Column(DateTime, default=utcnow, nullable=False, index=True)
    updatedAt = Column(DateTime, default=utcnow, nullable=False)
