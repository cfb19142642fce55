import logging
from dataclasses import dataclass

from smartattend.exceptions import (
    DeliveryFailure,
    InvalidCredential,
    InvalidOrExpiredCode,
    NotFound,
    UnknownIdentifier,
)
from smartattend.services.codeManager import OneTimeCodeManager
from smartattend.utils.credentialVerifier import CredentialVerifier
from smartattend.utils.mailer import Notifier
from smartattend.utils.validators import require_fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    user_id: int
    email: str


@dataclass(frozen=True)
class CodeMessages:
    """Wording of the 2FA emails, which differs between the two portals."""

    sender_name: str
    login_subject: str
    login_body: str
    resend_subject: str
    resend_body: str


USER_MESSAGES = CodeMessages(
    sender_name="SmartAttend",
    login_subject="Your 2FA code",
    login_body="Your 2FA code is: {code}",
    resend_subject="Your new 2FA code",
    resend_body="Your new 2FA code is: {code}",
)

ADMIN_MESSAGES = CodeMessages(
    sender_name="MyApp Admin",
    login_subject="Your 2FA Verification Code",
    login_body="Your verification code is: {code}",
    resend_subject="Your New 2FA Code",
    resend_body="Your new verification code is: {code}",
)


class AuthFlow:
    """Password login followed by an emailed one-time code.

    Nothing is kept between requests except the code row itself:
    ``login`` and ``resend_2fa`` leave exactly one live code for the user,
    ``verify_2fa`` burns it.

    Delivery happens after the code is committed. If the email fails the
    request fails with DeliveryFailure, but the stored code stays valid
    until it expires or is replaced by ``resend_2fa``.
    """

    def __init__(
        self,
        users,
        codes: OneTimeCodeManager,
        notifier: Notifier,
        verifier: CredentialVerifier,
        messages: CodeMessages = USER_MESSAGES,
    ):
        self.users = users
        self.codes = codes
        self.notifier = notifier
        self.verifier = verifier
        self.messages = messages

    def login(self, email, password) -> AuthResult:
        require_fields("Email and password are required", email, password)

        user = self.users.find_user_by_identifier(email)
        if user is None:
            raise UnknownIdentifier("User not found")

        if not self.verifier.verify(password, user.password_hash):
            raise InvalidCredential("Invalid password")

        code = self.codes.issue(user.id)
        self._deliver(user, self.messages.login_subject, self.messages.login_body, code)
        return AuthResult(user_id=user.id, email=user.email)

    def verify_2fa(self, user_id, code) -> AuthResult:
        require_fields("userId and code are required", user_id, code)

        if not self.codes.verify(user_id, code):
            raise InvalidOrExpiredCode("Invalid or expired code")

        user = self.users.find_user_by_id(user_id)
        if user is None:
            # Code rows reference users, so this only happens if the user
            # was deleted between issuance and verification.
            raise InvalidOrExpiredCode("Invalid or expired code")
        return AuthResult(user_id=user.id, email=user.email)

    def resend_2fa(self, user_id) -> AuthResult:
        require_fields("userId is required", user_id)

        user = self.users.find_user_by_id(user_id)
        if user is None:
            raise NotFound("User not found")

        code = self.codes.resend(user.id)
        self._deliver(user, self.messages.resend_subject, self.messages.resend_body, code)
        return AuthResult(user_id=user.id, email=user.email)

    def update_password(self, user_id, current_password, new_password) -> None:
        require_fields(
            "userId, currentPassword, and newPassword are required",
            user_id,
            current_password,
            new_password,
        )

        user = self.users.find_user_by_id(user_id)
        if user is None:
            raise NotFound("User not found")

        if not self.verifier.verify(current_password, user.password_hash):
            raise InvalidCredential("Current password is incorrect")

        self.users.update_secret(user.id, self.verifier.hash(new_password))

    def reset_password(self, user_id, email, new_password) -> AuthResult:
        require_fields("userId, email, and newPassword are required", user_id, email, new_password)

        user = self.users.find_user_by_id_and_identifier(user_id, email)
        if user is None:
            raise NotFound("User not found")

        self.users.update_secret(user.id, self.verifier.hash(new_password))
        return AuthResult(user_id=user.id, email=user.email)

    def _deliver(self, user, subject, body, code):
        try:
            self.notifier.send(
                user.email,
                subject,
                body.format(code=code),
                sender_name=self.messages.sender_name,
            )
        except Exception as e:
            logger.exception(f"2FA code for user {user.id} stored but not delivered")
            raise DeliveryFailure("Failed to send 2FA code, please request a new one") from e
