from __future__ import annotations

from smartattend.api.dependencies import get_notifier
from smartattend.main import app
from smartattend.models import Notification, TwoFactorCode, User

from ..conftest import FailingNotifier


def test_two_factor_login_round_trip(client, user, notifier):
    response = client.post("/user/login", json={"email": "a@x.com", "password": "p1"})

    assert response.status_code == 200
    assert response.json() == {
        "message": "Login successful, 2FA code sent",
        "userId": user.id,
        "email": "a@x.com",
    }

    code = notifier.last_code
    response = client.post("/user/verify-2fa", json={"userId": user.id, "code": code})
    assert response.status_code == 200
    assert response.json() == {"message": "2FA verified", "userId": user.id, "email": "a@x.com"}

    response = client.post("/user/verify-2fa", json={"userId": user.id, "code": code})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid or expired code"}


def test_login_errors(client, user):
    missing = client.post("/user/login", json={"email": "a@x.com"})
    unknown = client.post("/user/login", json={"email": "b@x.com", "password": "p1"})
    wrong = client.post("/user/login", json={"email": "a@x.com", "password": "nope"})

    assert (missing.status_code, missing.json()) == (400, {"error": "Email and password are required"})
    assert (unknown.status_code, unknown.json()) == (401, {"error": "User not found"})
    assert (wrong.status_code, wrong.json()) == (401, {"error": "Invalid password"})


def test_delivery_failure_is_reported_and_code_survives(client, user, session_factory):
    app.dependency_overrides[get_notifier] = FailingNotifier

    response = client.post("/user/login", json={"email": "a@x.com", "password": "p1"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to send 2FA code, please request a new one"}

    with session_factory() as session:
        stored = session.query(TwoFactorCode).filter(TwoFactorCode.user_id == user.id).one()
        code = stored.code

    response = client.post("/user/verify-2fa", json={"userId": user.id, "code": code})
    assert response.status_code == 200


def test_resend(client, user, notifier, fixed_codes):
    client.post("/user/login", json={"email": "a@x.com", "password": "p1"})
    first = notifier.last_code

    response = client.post("/user/resend-2fa", json={"userId": user.id})

    assert response.status_code == 200
    assert response.json() == {"message": "2FA code resent", "userId": user.id, "email": "a@x.com"}
    assert client.post("/user/verify-2fa", json={"userId": user.id, "code": first}).status_code == 401
    assert client.post("/user/verify-2fa", json={"userId": user.id, "code": notifier.last_code}).status_code == 200


def test_resend_errors(client):
    assert client.post("/user/resend-2fa", json={}).status_code == 400
    response = client.post("/user/resend-2fa", json={"userId": 99})
    assert (response.status_code, response.json()) == (404, {"error": "User not found"})


def test_update_password(client, user, db):
    wrong = client.post(
        "/user/update-password",
        json={"userId": user.id, "currentPassword": "nope", "newPassword": "p2"},
    )
    assert (wrong.status_code, wrong.json()) == (401, {"error": "Current password is incorrect"})

    ok = client.post(
        "/user/update-password",
        json={"userId": user.id, "currentPassword": "p1", "newPassword": "p2"},
    )
    assert (ok.status_code, ok.json()) == (200, {"message": "Password updated successfully"})

    db.expire_all()
    assert db.get(User, user.id).password_hash == "p2"

    missing = client.post("/user/update-password", json={"userId": user.id})
    assert missing.status_code == 400


def test_check_in_and_out(client, user, office, clock):
    response = client.post(
        "/user/checkin",
        json={"userId": user.id, "userLatitude": 0, "userLongitude": 0.0008, "notes": "gate A"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Check-in recorded successfully"
    assert body["timestamp"] == clock.now().isoformat()

    clock.advance(hours=9)
    response = client.post(
        "/user/checkout", json={"userId": user.id, "userLatitude": 0, "userLongitude": 0}
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Checkout recorded successfully"

    history = client.post("/user/get-attendance-user", json={"userId": user.id}).json()
    assert [row["type"] for row in history] == ["checkout", "check-in"]
    assert history[1]["attendanceId"] == body["attendanceId"]
    assert history[1]["notes"] == "gate A"
    assert history[1]["userLongitude"] == 0.0008


def test_check_in_outside_geofence(client, user, office):
    response = client.post(
        "/user/checkin", json={"userId": user.id, "userLatitude": 0, "userLongitude": 0.002}
    )

    assert response.status_code == 403
    assert response.json() == {"error": "You are outside the allowed check-in area"}


def test_check_in_input_errors(client, user, office):
    missing = client.post("/user/checkin", json={"userId": user.id, "userLatitude": 0})
    garbage = client.post(
        "/user/checkin", json={"userId": user.id, "userLatitude": "north", "userLongitude": 0}
    )

    assert missing.status_code == 400
    assert missing.json() == {"error": "userId, userLatitude, and userLongitude are required"}
    assert garbage.status_code == 400
    assert "error" in garbage.json()


def test_check_in_without_office(client, user):
    response = client.post(
        "/user/checkin", json={"userId": user.id, "userLatitude": 0, "userLongitude": 0}
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Office location configuration not found"}


def test_get_user(client, user):
    response = client.post("/user/get-user", json={"userId": user.id})

    assert response.status_code == 200
    assert response.json() == {
        "userId": user.id,
        "name": "Ani",
        "email": "a@x.com",
        "role": "user",
        "nim_nip": "2201001",
    }
    assert client.post("/user/get-user", json={"userId": 99}).status_code == 404
    assert client.post("/user/get-user", json={}).status_code == 400


def test_office_location(client, office):
    response = client.get("/user/get-office-location")

    assert response.status_code == 200
    body = response.json()
    assert body["locationId"] == 1
    assert body["locationName"] == "Head Office"
    assert body["radius"] == 100.0


def test_office_location_missing(client):
    response = client.get("/user/get-office-location")

    assert (response.status_code, response.json()) == (404, {"error": "Office location not found"})


def test_notifications(client, db, clock, user):
    assert client.get("/user/get-notification-latest").status_code == 404

    db.add(Notification(title="Holiday", message="Office closed Friday", created_at=clock.now()))
    clock.advance(hours=1)
    db.add(Notification(title="Reminder", message="Update your profile", created_at=clock.now()))
    db.commit()

    latest = client.get("/user/get-notification-latest").json()
    assert latest["title"] == "Reminder"
    assert latest["createdAt"] == "2026-03-02 09:00:00"

    assert client.get("/user/get-notifications-all").status_code == 400
    everything = client.get("/user/get-notifications-all", params={"userId": user.id}).json()
    assert [n["title"] for n in everything] == ["Reminder", "Holiday"]


def test_missing_body_reaches_field_checks(client, user, office):
    resend = client.post("/user/resend-2fa")
    checkin = client.post(
        "/user/checkin", content="null", headers={"Content-Type": "application/json"}
    )
    profile = client.post("/user/get-user")

    assert (resend.status_code, resend.json()) == (400, {"error": "userId is required"})
    assert (checkin.status_code, checkin.json()) == (
        400,
        {"error": "userId, userLatitude, and userLongitude are required"},
    )
    assert (profile.status_code, profile.json()) == (400, {"error": "userId is required"})
