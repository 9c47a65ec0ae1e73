"""Request and response types for a single contact form invocation."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

CAPTCHA_FIELD = "cf-turnstile-response"
PRIVACY_FIELD = "privacy_policy"


@dataclass(frozen=True)
class SubmissionRequest:
    """Form fields parsed from the request body."""
    name: Any = None
    email: Any = None
    subject: Any = None
    message: Any = None
    captcha_token: Any = None
    privacy_accepted: Any = None

    @classmethod
    def from_body(cls, body: Dict[str, Any]) -> "SubmissionRequest":
        return cls(
            name=body.get("name"),
            email=body.get("email"),
            subject=body.get("subject"),
            message=body.get("message"),
            captcha_token=body.get(CAPTCHA_FIELD),
            privacy_accepted=body.get(PRIVACY_FIELD),
        )

    def is_complete(self) -> bool:
        """All required fields are present and truthy."""
        return all([
            self.captcha_token,
            self.privacy_accepted,
            self.name,
            self.email,
            self.message,
        ])


@dataclass(frozen=True)
class ResponseEnvelope:
    """API Gateway proxy response."""
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def build(
        cls,
        status_code: int,
        headers: Dict[str, str],
        success: bool,
        message: Optional[str] = None,
        error: Optional[str] = None,
    ) -> "ResponseEnvelope":
        payload: Dict[str, Any] = {"success": success}
        if message is not None:
            payload["message"] = message
        if error is not None:
            payload["error"] = error
        return cls(status_code, dict(headers), json.dumps(payload, ensure_ascii=False))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }
