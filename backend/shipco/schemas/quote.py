from datetime import datetime

from pydantic import BaseModel, field_validator

from shipco.schemas._fields import as_utc, number_to_text


class QuoteCreate(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    origin: str | None = None
    destination: str | None = None
    service: str | None = None
    weight: str | None = None
    message: str | None = None

    @field_validator("weight", mode="before")
    @classmethod
    def weight_as_text(cls, value):
        return number_to_text(value)


class QuoteUpdate(QuoteCreate):
    status: str | None = None


class QuoteResponse(BaseModel):
    id: str
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    origin: str | None = None
    destination: str | None = None
    service: str | None = None
    weight: str | None = None
    message: str | None = None
    status: str
    createdAt: datetime

    model_config = {"from_attributes": True}

    @field_validator("createdAt")
    @classmethod
    def created_at_as_utc(cls, value):
        return as_utc(value)
