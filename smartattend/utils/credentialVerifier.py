from typing import Protocol

from passlib.context import CryptContext


class CredentialVerifier(Protocol):
    """How a submitted password is checked against the stored secret."""

    def verify(self, password: str, stored: str) -> bool:
        ...

    def hash(self, password: str) -> str:
        ...


class PlainTextVerifier:
    """Stored secret is the password itself. Matches existing user rows."""

    def verify(self, password: str, stored: str) -> bool:
        return stored is not None and password == stored

    def hash(self, password: str) -> str:
        return password


class BcryptVerifier:
    def __init__(self):
        self.bcrypt_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

    def verify(self, password: str, stored: str) -> bool:
        try:
            return self.bcrypt_context.verify(password, stored)
        except ValueError:
            # stored value is not a bcrypt hash
            return False

    def hash(self, password: str) -> str:
        return self.bcrypt_context.hash(password)


def get_credential_verifier(scheme: str) -> CredentialVerifier:
    if scheme == "plaintext":
        return PlainTextVerifier()
    if scheme == "bcrypt":
        return BcryptVerifier()
    raise ValueError(f"Unknown password scheme: {scheme!r}")
