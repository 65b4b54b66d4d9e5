from sqlalchemy import Column, DateTime, String, Text

from shipco.database import Base
from shipco.models._common import new_id, utcnow


class Quote(Base):
    __tablename__ = "quotes"

    id = Column(String(32), primary_key=True, default=new_id)

    name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    company = Column(String, nullable=True)
    origin = Column(String, nullable=True)
    destination = Column(String, nullable=True)
    service = Column(String, nullable=True)
    weight = Column(String, nullable=True)
    message = Column(Text, nullable=True)

    status = Column(String(50), nullable=False, default="new")
    createdAt = Column(DateTime, default=utcnow, nullable=False, index=True)
