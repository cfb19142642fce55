import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from smartattend.config import OFFICE_LOCATION_ID
from smartattend.database.session import transaction
from smartattend.models import AttendanceRecord, Location, TwoFactorCode, User

logger = logging.getLogger(__name__)


class UserStore:
    def __init__(self, db: Session):
        self.db = db

    def find_user_by_identifier(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def find_user_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_user_by_id_and_identifier(self, user_id: int, email: str) -> Optional[User]:
        return (
            self.db.query(User)
            .filter(User.id == user_id, User.email == email)
            .first()
        )

    def update_secret(self, user_id: int, secret: str) -> None:
        with transaction(self.db):
            self.db.query(User).filter(User.id == user_id).update(
                {User.password_hash: secret}
            )


class CodeStore:
    def __init__(self, db: Session):
        self.db = db

    def replace_code(self, user_id: int, code: str, expires_at: datetime) -> None:
        """Swap whatever code the user had for this one in a single transaction.

        The unique constraint on user_id makes a concurrent replacement for
        the same user fail on insert; the loser retries once so the last
        writer wins and exactly one code is left.
        """
        for attempt in (1, 2):
            try:
                with transaction(self.db):
                    self.db.query(TwoFactorCode).filter(
                        TwoFactorCode.user_id == user_id
                    ).delete(synchronize_session=False)
                    self.db.add(
                        TwoFactorCode(user_id=user_id, code=code, expires_at=expires_at)
                    )
                return
            except IntegrityError:
                if attempt == 2:
                    raise
                logger.warning(f"Concurrent 2FA code issuance for user {user_id}, retrying")

    def find_active_code(self, user_id: int, code: str, now: datetime) -> Optional[str]:
        row = (
            self.db.query(TwoFactorCode)
            .filter(
                TwoFactorCode.user_id == user_id,
                func.lower(TwoFactorCode.code) == code.lower(),
                TwoFactorCode.expires_at > now,
            )
            .first()
        )
        return row.code if row else None

    def consume_code(self, user_id: int, code: str) -> bool:
        with transaction(self.db):
            deleted = (
                self.db.query(TwoFactorCode)
                .filter(TwoFactorCode.user_id == user_id, TwoFactorCode.code == code)
                .delete(synchronize_session=False)
            )
        return deleted == 1


class LocationStore:
    def __init__(self, db: Session):
        self.db = db

    def get_office_location(self) -> Optional[Location]:
        return self.db.query(Location).filter(Location.id == OFFICE_LOCATION_ID).first()

    def upsert_office_location(
        self,
        *,
        location_name: str,
        latitude: float,
        longitude: float,
        radius: float,
        now: datetime,
    ) -> Location:
        with transaction(self.db):
            location = self.get_office_location()
            if location is None:
                location = Location(id=OFFICE_LOCATION_ID, created_at=now)
                self.db.add(location)
            location.location_name = location_name
            location.latitude = latitude
            location.longitude = longitude
            location.radius = radius
        return location


class AttendanceStore:
    def __init__(self, db: Session):
        self.db = db

    def insert_event(
        self,
        *,
        user_id: int,
        attendance_type: str,
        timestamp: datetime,
        user_latitude: float,
        user_longitude: float,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        record = AttendanceRecord(
            user_id=user_id,
            location_id=OFFICE_LOCATION_ID,
            type=attendance_type,
            timestamp=timestamp,
            user_latitude=user_latitude,
            user_longitude=user_longitude,
            notes=notes,
        )
        with transaction(self.db):
            self.db.add(record)
        self.db.refresh(record)
        return record

    def list_events(self, user_id: Optional[int] = None) -> List[AttendanceRecord]:
        query = self.db.query(AttendanceRecord)
        if user_id is not None:
            query = query.filter(AttendanceRecord.user_id == user_id)
        return query.order_by(AttendanceRecord.timestamp.desc(), AttendanceRecord.id.desc()).all()
