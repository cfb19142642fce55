from starlette import status


class SmartAttendError(Exception):
    """Base exception for failures reported to the client.

    Every subclass maps to one HTTP status; the message is what the
    client sees in the ``error`` field.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingInput(SmartAttendError):
    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateEntry(SmartAttendError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(SmartAttendError):
    status_code = status.HTTP_404_NOT_FOUND


class UnknownIdentifier(NotFound):
    """Login with an email nobody registered. Reported as 401, not 404."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidCredential(SmartAttendError):
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidOrExpiredCode(SmartAttendError):
    """Wrong, expired, already used or never issued. Never say which."""

    status_code = status.HTTP_401_UNAUTHORIZED


class OutOfRange(SmartAttendError):
    status_code = status.HTTP_403_FORBIDDEN


class ConfigurationMissing(SmartAttendError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class DeliveryFailure(SmartAttendError):
    """The code was stored but the email never left. Safe to resend."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class StoreFailure(SmartAttendError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
