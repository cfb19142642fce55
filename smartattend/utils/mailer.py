import smtplib
from email.message import EmailMessage
from typing import Optional, Protocol

from smartattend.exceptions import DeliveryFailure


class Notifier(Protocol):
    def send(self, to_address: str, subject: str, body: str, sender_name: Optional[str] = None) -> None:
        """Deliver a message or raise DeliveryFailure."""
        ...


class SMTPNotifier:
    """Sends plain-text mail through an SMTP relay (Gmail by default)."""

    def __init__(
        self,
        host: str,
        port: int,
        username: Optional[str],
        password: Optional[str],
        *,
        from_address: str = "no-reply@myapp.com",
        timeout: float = 10,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_address = from_address
        self.timeout = timeout

    def send(self, to_address: str, subject: str, body: str, sender_name: Optional[str] = None) -> None:
        message = EmailMessage()
        message["From"] = f'"{sender_name}" <{self.from_address}>' if sender_name else self.from_address
        message["To"] = to_address
        message["Subject"] = subject
        message.set_content(body)

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
                smtp.starttls()
                if self.username:
                    smtp.login(self.username, self.password or "")
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise DeliveryFailure("Failed to send email") from e
