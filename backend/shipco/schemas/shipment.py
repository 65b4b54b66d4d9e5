from datetime import datetime

from pydantic import BaseModel, field_validator

from shipco.schemas._fields import as_utc, number_to_text


class EventCreate(BaseModel):
    time: datetime | None = None
    status: str | None = None
    location: str | None = None
    note: str | None = None


class EventIn(EventCreate):
    """Event supplied inline when a shipment is created; id is optional."""

    id: str | None = None


class EventResponse(BaseModel):
    id: str
    time: datetime
    status: str
    location: str = ""
    note: str = ""

    @field_validator("time")
    @classmethod
    def time_as_utc(cls, value):
        return as_utc(value)


class ShipmentCreate(BaseModel):
    customer: str | None = None
    email: str | None = None
    origin: str | None = None
    destination: str | None = None
    service: str | None = None
    weight: str | None = None
    status: str | None = None
    events: list[EventIn] | None = None

    @field_validator("weight", mode="before")
    @classmethod
    def weight_as_text(cls, value):
        return number_to_text(value)


class ShipmentUpdate(BaseModel):
    customer: str | None = None
    email: str | None = None
    origin: str | None = None
    destination: str | None = None
    service: str | None = None
    weight: str | None = None
    status: str | None = None

    @field_validator("weight", mode="before")
    @classmethod
    def weight_as_text(cls, value):
        return number_to_text(value)


class ShipmentResponse(BaseModel):
    id: str
    trackingNumber: str
    customer: str | None = None
    email: str | None = None
    origin: str | None = None
    destination: str | None = None
    service: str | None = None
    weight: str | None = None
    status: str
    events: list[EventResponse]
    createdAt: datetime
    updatedAt: datetime

    model_config = {"from_attributes": True}

    @field_validator("createdAt", "updatedAt")
    @classmethod
    def timestamps_as_utc(cls, value):
        return as_utc(value)
