from typing import Optional

from fastapi import APIRouter

from smartattend.api.dependencies import db_dependency, recorder_dependency, user_auth_dependency
from smartattend.api.errors import failure_boundary
from smartattend.api.serializers import attendance_row, location_row, notification_row
from smartattend.database.stores import AttendanceStore, LocationStore, UserStore
from smartattend.exceptions import MissingInput, NotFound
from smartattend.models import Notification
from smartattend.schemas.attendance import AttendanceRequest
from smartattend.schemas.auth import (
    LoginRequest,
    ResendCodeRequest,
    UpdatePasswordRequest,
    VerifyCodeRequest,
)
from smartattend.schemas.user import UserIdRequest

router = APIRouter(prefix="/user", tags=["user"])


# ----------------------------------------Authentication & 2FA--------------------------------------------
@router.post("/login")
def login(auth: user_auth_dependency, body: LoginRequest = LoginRequest()):
    """Checks email and password, then emails a 2FA code."""
    with failure_boundary("Login failed"):
        result = auth.login(body.email, body.password)

    return {
        "message": "Login successful, 2FA code sent",
        "userId": result.user_id,
        "email": result.email,
    }


@router.post("/update-password")
def update_password(
    auth: user_auth_dependency,
    body: UpdatePasswordRequest = UpdatePasswordRequest(),
):
    with failure_boundary("Failed to update password"):
        auth.update_password(body.user_id, body.current_password, body.new_password)

    return {"message": "Password updated successfully"}


@router.post("/verify-2fa")
def verify_2fa(auth: user_auth_dependency, body: VerifyCodeRequest = VerifyCodeRequest()):
    code = str(body.code) if body.code is not None else None
    with failure_boundary("2FA verification failed"):
        result = auth.verify_2fa(body.user_id, code)

    return {"message": "2FA verified", "userId": result.user_id, "email": result.email}


@router.post("/resend-2fa")
def resend_2fa(auth: user_auth_dependency, body: ResendCodeRequest = ResendCodeRequest()):
    with failure_boundary("Failed to resend 2FA code"):
        result = auth.resend_2fa(body.user_id)

    return {"message": "2FA code resent", "userId": result.user_id, "email": result.email}


# ----------------------------------------Notifications--------------------------------------------
@router.get("/get-notification-latest")
def get_notification_latest(db: db_dependency):
    with failure_boundary("Failed to fetch latest notification"):
        notification = (
            db.query(Notification)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .first()
        )

    if notification is None:
        raise NotFound("No notifications found")
    return notification_row(notification)


@router.get("/get-notifications-all")
def get_notifications_all(db: db_dependency, userId: Optional[int] = None):
    """Notifications are broadcast, so every user sees the same list."""
    if not userId:
        raise MissingInput("userId is required")

    with failure_boundary("Failed to fetch notifications"):
        notifications = (
            db.query(Notification)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .all()
        )
        return [notification_row(n) for n in notifications]


# ----------------------------------------Profile--------------------------------------------
@router.post("/get-user")
def get_user(db: db_dependency, body: UserIdRequest = UserIdRequest()):
    if not body.user_id:
        raise MissingInput("userId is required")

    with failure_boundary("Failed to fetch user"):
        user = UserStore(db).find_user_by_id(body.user_id)

    if user is None:
        raise NotFound("User not found")

    return {
        "userId": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "nim_nip": user.nim_nip,
    }


# ----------------------------------------Attendance--------------------------------------------
@router.post("/get-attendance-user")
def get_attendance_user(db: db_dependency, body: UserIdRequest = UserIdRequest()):
    if not body.user_id:
        raise MissingInput("userId is required")

    with failure_boundary("Failed to fetch attendance"):
        records = AttendanceStore(db).list_events(user_id=body.user_id)
        return [attendance_row(r) for r in records]


@router.post("/checkin")
def checkin(recorder: recorder_dependency, body: AttendanceRequest = AttendanceRequest()):
    with failure_boundary("Failed to record check-in"):
        receipt = recorder.check_in(
            body.user_id, body.user_latitude, body.user_longitude, body.notes
        )

    return {
        "message": "Check-in recorded successfully",
        "attendanceId": receipt.attendance_id,
        "timestamp": receipt.timestamp,
    }


@router.post("/checkout")
def checkout(recorder: recorder_dependency, body: AttendanceRequest = AttendanceRequest()):
    with failure_boundary("Failed to record checkout"):
        receipt = recorder.check_out(
            body.user_id, body.user_latitude, body.user_longitude, body.notes
        )

    return {
        "message": "Checkout recorded successfully",
        "attendanceId": receipt.attendance_id,
        "timestamp": receipt.timestamp,
    }


# ----------------------------------------Office--------------------------------------------
@router.get("/get-office-location")
def get_office_location(db: db_dependency):
    with failure_boundary("Failed to fetch office location"):
        location = LocationStore(db).get_office_location()

    if location is None:
        raise NotFound("Office location not found")
    return location_row(location)
