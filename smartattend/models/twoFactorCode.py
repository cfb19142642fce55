from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from smartattend.database.session import Base


class TwoFactorCode(Base):
    __tablename__ = "TwoFactorCodes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # unique: at most one live code per user
    user_id = Column(Integer, ForeignKey("Users.id"), unique=True, nullable=False)
    code = Column(String(16), nullable=False)
    expires_at = Column(DateTime, nullable=False)
