from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from smartattend.exceptions import ConfigurationMissing, OutOfRange
from smartattend.models.attendanceRecord import AttendanceType
from smartattend.utils.clock import Clock
from smartattend.utils.geofence import check_user_in_circular_geofence
from smartattend.utils.validators import require_coordinates, require_fields


@dataclass(frozen=True)
class AttendanceReceipt:
    attendance_id: int
    timestamp: datetime


class AttendanceRecorder:
    """Geofenced check-in / checkout.

    The only gate is the distance to the office; a user may check in any
    number of times without checking out.
    """

    def __init__(self, locations, attendance, clock: Clock):
        self.locations = locations
        self.attendance = attendance
        self.clock = clock

    def record(
        self,
        user_id,
        attendance_type: AttendanceType,
        user_latitude,
        user_longitude,
        notes: Optional[str] = None,
    ) -> AttendanceReceipt:
        missing = "userId, userLatitude, and userLongitude are required"
        require_fields(missing, user_id)
        require_coordinates(missing, user_latitude, user_longitude)

        office = self.locations.get_office_location()
        if office is None:
            raise ConfigurationMissing("Office location configuration not found")

        if not check_user_in_circular_geofence(user_latitude, user_longitude, office):
            raise OutOfRange(f"You are outside the allowed {attendance_type.value} area")

        record = self.attendance.insert_event(
            user_id=user_id,
            attendance_type=attendance_type.value,
            timestamp=self.clock.now(),
            user_latitude=user_latitude,
            user_longitude=user_longitude,
            notes=notes or None,
        )
        return AttendanceReceipt(attendance_id=record.id, timestamp=record.timestamp)

    def check_in(self, user_id, user_latitude, user_longitude, notes=None) -> AttendanceReceipt:
        return self.record(user_id, AttendanceType.CHECK_IN, user_latitude, user_longitude, notes)

    def check_out(self, user_id, user_latitude, user_longitude, notes=None) -> AttendanceReceipt:
        return self.record(user_id, AttendanceType.CHECK_OUT, user_latitude, user_longitude, notes)
