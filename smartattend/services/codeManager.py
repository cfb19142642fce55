import secrets
import string
from datetime import timedelta
from typing import Optional, Protocol

from smartattend.utils.clock import Clock

CODE_ALPHABETS = {
    "digits": string.digits,
    "alphanumeric": string.ascii_lowercase + string.digits,
}


def generate_code(length=6, characters=string.digits):
    return "".join(secrets.choice(characters) for _ in range(length))


class CodeRepository(Protocol):
    def replace_code(self, user_id, code, expires_at) -> None:
        raise NotImplementedError

    def find_active_code(self, user_id, code, now) -> Optional[str]:
        raise NotImplementedError

    def consume_code(self, user_id, code) -> bool:
        raise NotImplementedError


class OneTimeCodeManager:
    """Issues, checks and burns the single live 2FA code of each user."""

    def __init__(
        self,
        store: CodeRepository,
        clock: Clock,
        *,
        length: int = 6,
        ttl: timedelta = timedelta(minutes=15),
        characters: str = string.digits,
    ):
        self.store = store
        self.clock = clock
        self.length = length
        self.ttl = ttl
        self.characters = characters

    def issue(self, user_id: int) -> str:
        code = generate_code(self.length, self.characters)
        self.store.replace_code(user_id, code, self.clock.now() + self.ttl)
        return code

    def resend(self, user_id: int) -> str:
        return self.issue(user_id)

    def verify(self, user_id: int, submitted: str) -> bool:
        if not submitted or not submitted.strip():
            return False

        stored = self.store.find_active_code(user_id, submitted.strip(), self.clock.now())
        if stored is None:
            return False

        # Delete the stored spelling, not the submitted one; only the
        # request that actually removes the row gets through.
        return self.store.consume_code(user_id, stored)
