def attendance_row(record):
    return {
        "attendanceId": record.id,
        "userId": record.user_id,
        "locationId": record.location_id,
        "type": record.type,
        "timestamp": record.timestamp,
        "userLatitude": record.user_latitude,
        "userLongitude": record.user_longitude,
        "status": record.status,
        "notes": record.notes,
    }


def notification_row(notification):
    return {
        "notificationId": notification.id,
        "title": notification.title,
        "message": notification.message,
        "createdAt": notification.created_at.strftime("%Y-%m-%d %H:%M:%S")
        if notification.created_at
        else None,
    }


def location_row(location):
    return {
        "locationId": location.id,
        "locationName": location.location_name,
        "latitude": location.latitude,
        "longitude": location.longitude,
        "radius": location.radius,
        "createdAt": location.created_at,
    }
