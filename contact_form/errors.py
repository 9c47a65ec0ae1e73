"""Error types shared by the contact form pipeline."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ContactFormError(Exception):
    """Base class for contact form collaborator failures."""


class CaptchaVerificationError(ContactFormError):
    """The captcha verification call itself failed (transport or bad reply)."""


class EmailDeliveryError(ContactFormError):
    """Amazon SES rejected the message or could not be reached."""


class ErrorKind(Enum):
    VALIDATION = "validation"
    CAPTCHA_REJECTED = "captcha_rejected"
    UNEXPECTED = "unexpected"


# HTTP status returned for each failure kind
STATUS_CODES = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.CAPTCHA_REJECTED: 403,
    ErrorKind.UNEXPECTED: 500,
}


@dataclass(frozen=True)
class Failure:
    """Outcome of a pipeline step that did not produce a value."""
    kind: ErrorKind
    detail: str = ""
    exception: Optional[BaseException] = None

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]
