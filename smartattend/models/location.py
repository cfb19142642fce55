from sqlalchemy import Column, DateTime, Float, Integer, String

from smartattend.database.session import Base


class Location(Base):
    __tablename__ = "Locations"

    # Singleton row, always id 1
    id = Column(Integer, primary_key=True, autoincrement=False)
    location_name = Column(String(100))
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    radius = Column(Float, nullable=False)
    created_at = Column(DateTime)
