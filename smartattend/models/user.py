from sqlalchemy import Column, Integer, String
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import relationship

from smartattend.database.session import Base


class User(Base):
    __tablename__ = "Users"

    id = Column(Integer, autoincrement=True, primary_key=True)
    name = Column(String(100))
    # Login identifier, compared case-sensitively on every backend
    email = Column(
        String(120).with_variant(mysql.VARCHAR(120, collation="utf8mb4_bin"), "mysql"),
        unique=True,
        nullable=False,
    )
    # Stored secret representation, format depends on the credential verifier
    password_hash = Column(String(128), nullable=False)
    role = Column(String(15), default="user")
    nim_nip = Column(String(50))

    attendances = relationship("AttendanceRecord", back_populates="user")
