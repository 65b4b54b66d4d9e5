"""The single administrative account. Only a bcrypt hash of the password is kept."""

from sqlalchemy import Column, DateTime, Integer, String

from shipco.database import Base
from shipco.models._common import new_id, utcnow

ADMIN_ROLE = "admin"
ADMIN_SLOT = 1


class Credential(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    email = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)
    role = Column(String(20), nullable=False, default=ADMIN_ROLE)
    createdAt = Column(DateTime, default=utcnow, nullable=False)
    # Every row takes the same value, so a second account violates the unique index.
    slot = Column(Integer, unique=True, nullable=False, default=ADMIN_SLOT)
