"""
Cloudflare Turnstile verification.

Posts the client token together with the shared secret to the siteverify
endpoint and reports whether Cloudflare accepted it.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import urllib3

from contact_form.errors import CaptchaVerificationError

logger = logging.getLogger(__name__)

SITEVERIFY_URL = "https://challenges.cloudflare.com/turnstile/v0/siteverify"


@dataclass(frozen=True)
class CaptchaResult:
    """Outcome reported by the verification endpoint."""
    success: bool
    error_codes: List[str] = field(default_factory=list)
    hostname: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)


class TurnstileVerifier:
    """Verifies Turnstile tokens against the siteverify endpoint."""

    def __init__(
        self,
        secret: str,
        http: Optional[urllib3.PoolManager] = None,
        url: str = SITEVERIFY_URL,
    ) -> None:
        self.secret = secret
        self.url = url
        self.http = http or urllib3.PoolManager(
            timeout=urllib3.Timeout(connect=2.0, read=5.0),
            retries=False,
        )

    def verify(self, token: str) -> CaptchaResult:
        """
        Verify a client-submitted token.

        Args:
            token: Value of the cf-turnstile-response form field

        Returns:
            CaptchaResult with the provider's verdict

        Raises:
            CaptchaVerificationError: the call failed or the reply was not JSON
        """
        try:
            response = self.http.request(
                "POST",
                self.url,
                fields={"secret": self.secret, "response": token},
                encode_multipart=False,
                retries=False,
            )
        except urllib3.exceptions.HTTPError as e:
            raise CaptchaVerificationError(f"Turnstile request failed: {e}") from e

        try:
            payload = json.loads(response.data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise CaptchaVerificationError(
                f"Turnstile returned a non-JSON reply (status {response.status})"
            ) from e

        if not isinstance(payload, dict):
            raise CaptchaVerificationError("Turnstile reply is not a JSON object")

        logger.debug(f"Turnstile replied with status {response.status}")

        return CaptchaResult(
            success=payload.get("success") is True,
            error_codes=list(payload.get("error-codes") or []),
            hostname=payload.get("hostname"),
            raw=payload,
        )
