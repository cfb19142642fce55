import enum

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from smartattend.database.session import Base


class AttendanceType(str, enum.Enum):
    CHECK_IN = "check-in"
    CHECK_OUT = "checkout"


class AttendanceRecord(Base):
    __tablename__ = "AttendanceRecords"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("Users.id"), nullable=False, index=True)
    location_id = Column(Integer, ForeignKey("Locations.id"))
    type = Column(String(15), nullable=False)
    timestamp = Column(DateTime, nullable=False)
    user_latitude = Column(Float)
    user_longitude = Column(Float)
    status = Column(String(30))
    notes = Column(Text)

    user = relationship("User", back_populates="attendances")
