from sqlalchemy import Column, DateTime, Integer, String, Text

from smartattend.database.session import Base


class Notification(Base):
    __tablename__ = "Notifications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(150), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime)
