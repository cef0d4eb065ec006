"""
RSVP model
"""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from wedding_rsvp.core.db import Base

class RSVP(Base):
    __tablename__ = "rsvps"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50))
    attending = Column(String(20), nullable=False)  # yes, no (not enforced)
    adults = Column(Integer, default=1)
    children = Column(Integer, default=0)
    dietary = Column(Text)
    song = Column(Text)
    message = Column(Text)
    created_at = Column(DateTime, server_default=func.current_timestamp())

    # ids are never reused, even after the highest row is gone
    __table_args__ = {"sqlite_autoincrement": True}
