from smartattend.models.attendanceRecord import AttendanceRecord, AttendanceType
from smartattend.models.location import Location
from smartattend.models.notification import Notification
from smartattend.models.twoFactorCode import TwoFactorCode
from smartattend.models.user import User

__all__ = [
    "AttendanceRecord",
    "AttendanceType",
    "Location",
    "Notification",
    "TwoFactorCode",
    "User",
]
