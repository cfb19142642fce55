from fastapi import APIRouter
from starlette import status

from smartattend.api.dependencies import (
    admin_auth_dependency,
    clock_dependency,
    db_dependency,
    verifier_dependency,
)
from smartattend.api.errors import failure_boundary
from smartattend.api.serializers import attendance_row, location_row, notification_row
from smartattend.database.session import transaction
from smartattend.database.stores import AttendanceStore, LocationStore
from smartattend.exceptions import DuplicateEntry, MissingInput, NotFound
from smartattend.models import Notification, TwoFactorCode, User
from smartattend.schemas.auth import (
    ForgetPasswordRequest,
    LoginRequest,
    ResendCodeRequest,
    VerifyCodeRequest,
)
from smartattend.schemas.location import SetLocationRequest
from smartattend.schemas.notification import CreateNotificationRequest, DeleteNotificationRequest
from smartattend.schemas.user import CreateUserRequest, EditUserRequest, UserIdRequest

router = APIRouter(prefix="/admin", tags=["admin"])


# ----------------------------------------Auth & 2FA--------------------------------------------
@router.post("/login")
def login(auth: admin_auth_dependency, body: LoginRequest = LoginRequest()):
    """Authenticates admin/user and sends a 2FA code via email."""
    with failure_boundary("Login failed"):
        result = auth.login(body.email, body.password)

    return {
        "message": "Login successful, 2FA code sent",
        "userId": result.user_id,
        "email": result.email,
    }


@router.post("/forget-password")
def forget_password(
    auth: admin_auth_dependency,
    body: ForgetPasswordRequest = ForgetPasswordRequest(),
):
    with failure_boundary("Failed to reset password"):
        result = auth.reset_password(body.user_id, body.email, body.new_password)

    return {
        "message": "Password updated successfully",
        "userId": result.user_id,
        "email": result.email,
    }


@router.post("/verify-2fa")
def verify_2fa(auth: admin_auth_dependency, body: VerifyCodeRequest = VerifyCodeRequest()):
    code = str(body.code) if body.code is not None else None
    with failure_boundary("2FA verification failed"):
        result = auth.verify_2fa(body.user_id, code)

    return {"message": "2FA verified", "userId": result.user_id, "email": result.email}


@router.post("/resend-2fa")
def resend_2fa(auth: admin_auth_dependency, body: ResendCodeRequest = ResendCodeRequest()):
    with failure_boundary("Failed to resend 2FA code"):
        result = auth.resend_2fa(body.user_id)

    return {"message": "2FA code resent", "userId": result.user_id, "email": result.email}


# ----------------------------------------User Management--------------------------------------------
@router.get("/get-user-all")
def get_user_all(db: db_dependency):
    with failure_boundary("Failed to fetch users"):
        users = db.query(User).order_by(User.id).all()
        return [
            {
                "userId": u.id,
                "name": u.name,
                "usernameEmail": u.email,
                "role": u.role,
                "nimNip": u.nim_nip,
            }
            for u in users
        ]


@router.post("/add-user", status_code=status.HTTP_201_CREATED)
def add_user(
    db: db_dependency,
    verifier: verifier_dependency,
    body: CreateUserRequest = CreateUserRequest(),
):
    if not body.name or not body.username_email or not body.password:
        raise MissingInput("Name, email, and password are required")

    with failure_boundary("Failed to add user"):
        existing_user = db.query(User).filter(User.email == body.username_email).first()
        if existing_user:
            raise DuplicateEntry("Email account already exists")

        new_user = User(
            name=body.name,
            email=body.username_email,
            password_hash=verifier.hash(body.password),
            role=body.role or "user",
            nim_nip=body.nim_nip or None,
        )
        with transaction(db):
            db.add(new_user)
        db.refresh(new_user)

    return {
        "success": True,
        "message": "User created successfully",
        "userId": new_user.id,
    }


@router.put("/edit-user")
def edit_user(
    db: db_dependency,
    verifier: verifier_dependency,
    body: EditUserRequest = EditUserRequest(),
):
    if not body.user_id:
        raise MissingInput("userId is required")

    with failure_boundary("Failed to update user"):
        user = db.query(User).filter(User.id == body.user_id).first()
        if user is None:
            raise NotFound("User not found")

        updates = {}
        if body.name:
            updates["name"] = body.name
        if body.username_email:
            updates["email"] = body.username_email
        if body.password:
            updates["password_hash"] = verifier.hash(body.password)
        if body.role:
            updates["role"] = body.role
        if body.nim_nip:
            updates["nim_nip"] = body.nim_nip

        if not updates:
            raise MissingInput("No fields to update")

        with transaction(db):
            for field, value in updates.items():
                setattr(user, field, value)

    return {"success": True, "userId": body.user_id}


@router.delete("/delete-user")
def delete_user(db: db_dependency, body: UserIdRequest = UserIdRequest()):
    if not body.user_id:
        raise MissingInput("userId is required")

    with failure_boundary("Failed to delete user"):
        user = db.query(User).filter(User.id == body.user_id).first()
        if user is None:
            raise NotFound("User not found")

        with transaction(db):
            db.query(TwoFactorCode).filter(TwoFactorCode.user_id == user.id).delete(
                synchronize_session=False
            )
            db.delete(user)

    return {"success": True, "deletedUserId": body.user_id}


# ----------------------------------------Attendance--------------------------------------------
@router.get("/get-attendance")
def get_attendance(db: db_dependency):
    with failure_boundary("Failed to fetch attendance"):
        return [attendance_row(r) for r in AttendanceStore(db).list_events()]


@router.post("/get-attendance-user")
def get_attendance_user(db: db_dependency, body: UserIdRequest = UserIdRequest()):
    if not body.user_id:
        raise MissingInput("userId is required")

    with failure_boundary("Failed to fetch user attendance"):
        records = AttendanceStore(db).list_events(user_id=body.user_id)
        return [attendance_row(r) for r in records]


# ----------------------------------------Notifications--------------------------------------------
@router.get("/get-notifications-all")
def get_notifications_all(db: db_dependency):
    with failure_boundary("Failed to fetch notifications"):
        notifications = (
            db.query(Notification)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .all()
        )
        return [notification_row(n) for n in notifications]


@router.post("/add-notification", status_code=status.HTTP_201_CREATED)
def add_notification(
    db: db_dependency,
    clock: clock_dependency,
    body: CreateNotificationRequest = CreateNotificationRequest(),
):
    if not body.title or not body.message:
        raise MissingInput("Title and message are required")

    with failure_boundary("Failed to add notification"):
        with transaction(db):
            db.add(Notification(title=body.title, message=body.message, created_at=clock.now()))

    return {"success": True, "message": "Notification sent successfully to all users"}


@router.delete("/delete-notification")
def delete_notification(
    db: db_dependency,
    body: DeleteNotificationRequest = DeleteNotificationRequest(),
):
    if not body.notification_id:
        raise MissingInput("notificationId is required")

    with failure_boundary("Failed to delete notification"):
        notification = (
            db.query(Notification).filter(Notification.id == body.notification_id).first()
        )
        if notification is None:
            raise NotFound("Notification not found")

        deleted = notification_row(notification)
        with transaction(db):
            db.delete(notification)

    return {"success": True, "deletedNotification": deleted}


# ----------------------------------------Office Settings--------------------------------------------
@router.get("/get-office-location")
def get_office_location(db: db_dependency):
    with failure_boundary("Failed to fetch office location"):
        location = LocationStore(db).get_office_location()
        return [location_row(location)] if location else []


@router.post("/set-office-location")
def set_office_location(
    db: db_dependency,
    clock: clock_dependency,
    body: SetLocationRequest = SetLocationRequest(),
):
    if (
        not body.location_name
        or body.latitude is None
        or body.longitude is None
        or body.radius is None
    ):
        raise MissingInput("locationName, latitude, longitude, and radius are required")

    with failure_boundary("Failed to set office location"):
        location = LocationStore(db).upsert_office_location(
            location_name=body.location_name,
            latitude=body.latitude,
            longitude=body.longitude,
            radius=body.radius,
            now=clock.now(),
        )

    return {
        "success": True,
        "message": "Office location updated successfully",
        "locationId": location.id,
    }
