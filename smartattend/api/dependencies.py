from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from smartattend import config
from smartattend.database.session import get_db
from smartattend.database.stores import AttendanceStore, CodeStore, LocationStore, UserStore
from smartattend.services.attendanceRecorder import AttendanceRecorder
from smartattend.services.authFlow import ADMIN_MESSAGES, USER_MESSAGES, AuthFlow
from smartattend.services.codeManager import CODE_ALPHABETS, OneTimeCodeManager
from smartattend.utils.clock import Clock
from smartattend.utils.credentialVerifier import CredentialVerifier, get_credential_verifier
from smartattend.utils.mailer import Notifier, SMTPNotifier

server_clock = Clock(config.TIMEZONE)


def get_clock() -> Clock:
    return server_clock


def get_notifier() -> Notifier:
    return SMTPNotifier(
        config.EMAIL_HOST,
        config.EMAIL_PORT,
        config.EMAIL_USER,
        config.EMAIL_PASS,
        timeout=config.EMAIL_TIMEOUT_SECONDS,
    )


def get_verifier() -> CredentialVerifier:
    return get_credential_verifier(config.PASSWORD_SCHEME)


# ----------------------------------------Dependencies--------------------------------------------
db_dependency = Annotated[Session, Depends(get_db)]
clock_dependency = Annotated[Clock, Depends(get_clock)]
notifier_dependency = Annotated[Notifier, Depends(get_notifier)]
verifier_dependency = Annotated[CredentialVerifier, Depends(get_verifier)]


def get_code_manager(db: db_dependency, clock: clock_dependency) -> OneTimeCodeManager:
    return OneTimeCodeManager(
        CodeStore(db),
        clock,
        length=config.TWO_FACTOR_CODE_LENGTH,
        ttl=timedelta(minutes=config.TWO_FACTOR_CODE_TTL_MINUTES),
        characters=CODE_ALPHABETS[config.TWO_FACTOR_CODE_ALPHABET],
    )


code_manager_dependency = Annotated[OneTimeCodeManager, Depends(get_code_manager)]


def get_user_auth_flow(
    db: db_dependency,
    codes: code_manager_dependency,
    notifier: notifier_dependency,
    verifier: verifier_dependency,
) -> AuthFlow:
    return AuthFlow(UserStore(db), codes, notifier, verifier, USER_MESSAGES)


def get_admin_auth_flow(
    db: db_dependency,
    codes: code_manager_dependency,
    notifier: notifier_dependency,
    verifier: verifier_dependency,
) -> AuthFlow:
    return AuthFlow(UserStore(db), codes, notifier, verifier, ADMIN_MESSAGES)


def get_attendance_recorder(db: db_dependency, clock: clock_dependency) -> AttendanceRecorder:
    return AttendanceRecorder(LocationStore(db), AttendanceStore(db), clock)


user_auth_dependency = Annotated[AuthFlow, Depends(get_user_auth_flow)]
admin_auth_dependency = Annotated[AuthFlow, Depends(get_admin_auth_flow)]
recorder_dependency = Annotated[AttendanceRecorder, Depends(get_attendance_recorder)]
